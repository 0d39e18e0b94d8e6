import aio_call


def test_default_context() -> None:
    assert aio_call.get_context().deadline is None


def test_set_context() -> None:
    deadline = aio_call.Deadline.from_timeout(10)

    with aio_call.set_context(deadline=deadline):
        assert aio_call.get_context().deadline is deadline

        with aio_call.set_context(deadline=None):
            assert aio_call.get_context().deadline is None

        assert aio_call.get_context().deadline is deadline

    assert aio_call.get_context().deadline is None
