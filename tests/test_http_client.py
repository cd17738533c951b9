import asyncio

import pytest
import pytest_asyncio
from aiohttp import test_utils, web

from reqtest.assertions import Outcome, TestEvaluator
from reqtest.suite import AuthConfig, AuthType, HttpMethod, Suite, TestDefinition
from reqtest.transport import AiohttpClient, RequestError, create_client


async def echo(request: web.Request) -> web.Response:
    body = await request.text()
    return web.json_response({
        "method": request.method,
        "path": request.path,
        "query": dict(request.query),
        "headers": {k.lower(): v for k, v in request.headers.items()},
        "body": body,
    })


async def text(request: web.Request) -> web.Response:
    return web.Response(text="pong")


async def number(request: web.Request) -> web.Response:
    return web.Response(text="10", content_type="application/json")


async def missing(request: web.Request) -> web.Response:
    return web.json_response({"error": "nope"}, status=404)


async def slow(request: web.Request) -> web.Response:
    await asyncio.sleep(1)
    return web.Response(text="late")


@pytest_asyncio.fixture
async def server():
    app = web.Application()
    app.router.add_route("*", "/echo", echo)
    app.router.add_get("/text", text)
    app.router.add_get("/number", number)
    app.router.add_get("/missing", missing)
    app.router.add_get("/slow", slow)
    srv = test_utils.TestServer(app)
    await srv.start_server()
    yield srv
    await srv.close()


def url_of(server, path):
    return str(server.make_url(path))


@pytest.mark.asyncio
async def test_get_treats_second_argument_as_config(server):
    async with AiohttpClient() as client:
        resp = await client.get(url_of(server, "/echo"), {"headers": {"X-Test": "1"}, "params": {"q": True}})

    assert resp.status == 200
    assert resp.data["method"] == "GET"
    assert resp.data["headers"]["x-test"] == "1"
    assert resp.data["query"] == {"q": "true"}
    assert resp.data["body"] == ""


@pytest.mark.asyncio
async def test_post_sends_json_body_and_config(server):
    async with AiohttpClient() as client:
        resp = await client.post(url_of(server, "/echo"), {"a": 1}, {"headers": {"X-Test": "2"}})

    assert resp.data["method"] == "POST"
    assert resp.data["body"] == '{"a": 1}'
    assert resp.data["headers"]["content-type"].startswith("application/json")
    assert resp.data["headers"]["x-test"] == "2"


@pytest.mark.asyncio
async def test_delete_takes_body_from_config_data(server):
    async with AiohttpClient() as client:
        resp = await client.delete(url_of(server, "/echo"), {"data": {"id": 3}})

    assert resp.data["method"] == "DELETE"
    assert resp.data["body"] == '{"id": 3}'


@pytest.mark.asyncio
async def test_get_ignores_non_object_config(server):
    async with AiohttpClient() as client:
        listed = await client.get(url_of(server, "/echo"), [1, 2])
        text_config = await client.delete(url_of(server, "/echo"), "raw")

    assert listed.status == 200
    assert listed.data["method"] == "GET"
    assert listed.data["body"] == ""
    assert text_config.data["method"] == "DELETE"


@pytest.mark.asyncio
async def test_evaluator_get_with_list_body_sends_request(server):
    async with AiohttpClient() as client:
        result = await TestEvaluator(client).evaluate(TestDefinition(
            method="get", url=url_of(server, "/text"), body=[1, 2], expect="pong",
        ))

    assert result.outcome == Outcome.SUCCEEDED


@pytest.mark.asyncio
async def test_text_and_json_scalars_are_decoded(server):
    async with AiohttpClient() as client:
        assert (await client.get(url_of(server, "/text"))).data == "pong"
        assert (await client.get(url_of(server, "/number"))).data == 10


@pytest.mark.asyncio
async def test_non_2xx_raises_request_error(server):
    async with AiohttpClient() as client:
        with pytest.raises(RequestError) as exc_info:
            await client.get(url_of(server, "/missing"))

    assert exc_info.value.message == "Request failed with status code 404"
    assert exc_info.value.status == 404
    assert exc_info.value.data == {"error": "nope"}


@pytest.mark.asyncio
async def test_validate_status_false_accepts_any_status(server):
    async with AiohttpClient() as client:
        resp = await client.get(url_of(server, "/missing"), {"validateStatus": False})

    assert resp.status == 404
    assert resp.data == {"error": "nope"}


@pytest.mark.asyncio
async def test_timeout_from_config(server):
    async with AiohttpClient() as client:
        with pytest.raises(RequestError) as exc_info:
            await client.get(url_of(server, "/slow"), {"timeout": 50})

    assert exc_info.value.message == "timeout of 50ms exceeded"


@pytest.mark.asyncio
async def test_connection_failure_raises_request_error():
    async with AiohttpClient() as client:
        with pytest.raises(RequestError):
            await client.get("http://127.0.0.1:1/unreachable")


@pytest.mark.asyncio
async def test_closed_client_raises_request_error():
    client = AiohttpClient()
    with pytest.raises(RequestError):
        await client.request(HttpMethod.GET, "http://x")


@pytest.mark.asyncio
async def test_base_url_defaults_and_auth(server):
    suite = Suite(name="s")
    suite.defaults.base_url = url_of(server, "/")
    suite.defaults.headers = {"X-Default": "d", "X-Over": "default"}
    suite.auth = AuthConfig(type=AuthType.BEARER, token="tok")

    async with create_client(suite) as client:
        resp = await client.get("/echo", {"headers": {"X-Over": "test"}})

    headers = resp.data["headers"]
    assert resp.data["path"] == "/echo"
    assert headers["x-default"] == "d"
    assert headers["x-over"] == "test"
    assert headers["authorization"] == "Bearer tok"


@pytest.mark.asyncio
async def test_config_basic_auth_replaces_suite_authorization(server):
    client = AiohttpClient(auth_config=AuthConfig(type=AuthType.BEARER, token="tok"))
    async with client:
        resp = await client.get(url_of(server, "/echo"), {"auth": {"username": "u", "password": "p"}})

    assert resp.data["headers"]["authorization"] == "Basic dTpw"


@pytest.mark.asyncio
async def test_evaluator_against_real_server(server):
    async with AiohttpClient() as client:
        evaluator = TestEvaluator(client)
        ok = await evaluator.evaluate(TestDefinition(
            method="get", url=url_of(server, "/number"), operator="gte", expect=10,
        ))
        failed = await evaluator.evaluate(TestDefinition(
            method="get", url=url_of(server, "/missing"), expect={"error": "nope"},
        ))

    assert ok.outcome == Outcome.SUCCEEDED
    assert failed.outcome == Outcome.REQUEST_ERROR
    assert failed.message == "Request failed with status code 404"
