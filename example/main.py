import asyncio
import dataclasses
import logging

import httpx

import aio_call


@dataclasses.dataclass
class User:
    name: str
    mail: str


async def main() -> None:
    async with httpx.AsyncClient() as client:
        response = await aio_call.call_with_client(
            client,
            "https://httpbin.org/post",
            aio_call.Method.POST,
            User(name="programador pobre", mail="pobre_coder@pobre.org"),
            {aio_call.Header.CONTENT_TYPE: aio_call.JSON_CONTENT_TYPE},
        )
        try:
            print(response.status, await response.read())
        finally:
            await response.close()

        request = aio_call.new_json_request("https://httpbin.org/put").put().with_marshal_body({"name": "a"})
        with aio_call.set_context(deadline=aio_call.Deadline.from_timeout(1)):
            response = await aio_call.send(request, aio_call.HttpxTransport(client))
        try:
            print(response.status)
        finally:
            await response.close()


if __name__ == "__main__":
    logging.basicConfig(level="DEBUG")
    asyncio.run(main())
