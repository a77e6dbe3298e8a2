"""Test configuration and fixtures."""

from typing import Any, AsyncGenerator, Callable

import httpx
import pytest
import pytest_asyncio

from etherscan_api.client import EtherscanAPI
from etherscan_api.config import get_settings

TEST_TOKEN = "TESTTOKEN123"

ApiFactory = Callable[..., EtherscanAPI]


@pytest.fixture(autouse=True)
def clear_settings_cache() -> None:
    """Drop cached settings so each test sees its own environment."""
    get_settings.cache_clear()


@pytest_asyncio.fixture
async def api_factory() -> AsyncGenerator[ApiFactory, None]:
    """
    Provide a factory for clients backed by ``httpx.MockTransport``.

    The factory takes either a JSON ``body`` (plus optional ``status_code``)
    or a full ``handler``. Requests are appended to ``requests`` when a list
    is given.
    """
    clients: list[httpx.AsyncClient] = []

    def factory(
        body: Any = None,
        status_code: int = 200,
        handler: Callable[[httpx.Request], httpx.Response] | None = None,
        requests: list[httpx.Request] | None = None,
        **kwargs: Any,
    ) -> EtherscanAPI:
        def default_handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, json=body)

        respond = handler or default_handler

        def recording_handler(request: httpx.Request) -> httpx.Response:
            if requests is not None:
                requests.append(request)
            return respond(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
        clients.append(client)
        return EtherscanAPI(TEST_TOKEN, client=client, **kwargs)

    yield factory

    for client in clients:
        await client.aclose()


def ok(result: Any, message: str = "OK") -> dict[str, Any]:
    """Build a success envelope."""
    return {"status": "1", "message": message, "result": result}


@pytest.fixture
def transaction_data() -> dict[str, str]:
    return {
        "blockNumber": "14923678",
        "timeStamp": "1654646411",
        "hash": "0xc52783ad354aecc04c670047754f062e3d6d04e8f5b24774472651f9c3882c60",
        "nonce": "1",
        "blockHash": "0x7e1638fd2c6bdd05ffd83c1cf06c63e2f67d0f802084bef076d06bdcf86d1bb0",
        "transactionIndex": "61",
        "from": "0x9aa99c23f67c81701c772b106b4f83f6e858dd2e",
        "to": "",
        "value": "0",
        "gas": "6000000",
        "gasPrice": "83924748773",
        "isError": "0",
        "txreceipt_status": "1",
        "input": "0x60806040",
        "contractAddress": "0xc5a8859c44ac8aa2169afacf45b87c08593bec10",
        "cumulativeGasUsed": "10450178",
        "gasUsed": "4457269",
        "confirmations": "122485",
        "methodId": "0x61014060",
        "functionName": "",
    }


@pytest.fixture
def internal_transaction_data() -> dict[str, str]:
    return {
        "blockNumber": "2535368",
        "timeStamp": "1477837690",
        "hash": "0x8a1a9989bda84f80143181a68bc137ecefa64d0d4ebde45dd94fc0cf49e70cb6",
        "from": "0x20d42f2e99a421147acf198d775395cac2e8b03d",
        "to": "",
        "value": "0",
        "contractAddress": "0x2c1ba59d6f58433fb1eaee7d20b26ed83bda51a3",
        "input": "",
        "type": "create",
        "gas": "254791",
        "gasUsed": "46750",
        "traceId": "0",
        "isError": "0",
        "errCode": "",
    }


@pytest.fixture
def erc20_transfer_data() -> dict[str, str]:
    return {
        "blockNumber": "4730207",
        "timeStamp": "1513240363",
        "hash": "0xe8c208398bd5ae8e4c237658580db56a2a94dfa0ca382c99b776fa6e7d31d5b4",
        "nonce": "406",
        "blockHash": "0x022c5e6a3d2487a8ccf8946a2ffb74938bf8e5c8a3f6d91b41c56378a02b5116",
        "from": "0x642ae78fafbb8032da552d619ad43f1d81e4dd7c",
        "contractAddress": "0x9f8f72aa9304c8b593d555f12ef6589cc3a579a2",
        "to": "0x4e83362442b8d1bec281594cea3050c8eb01311c",
        "value": "5901522149285533025181",
        "tokenName": "Maker",
        "tokenSymbol": "MKR",
        "tokenDecimal": "18",
        "transactionIndex": "81",
        "gas": "940000",
        "gasPrice": "32010000000",
        "gasUsed": "77759",
        "cumulativeGasUsed": "2523379",
        "input": "deprecated",
        "confirmations": "7968350",
    }


@pytest.fixture
def erc721_transfer_data() -> dict[str, str]:
    return {
        "blockNumber": "4708120",
        "timeStamp": "1512907118",
        "hash": "0x031e6968a8de362e4328d60dcc7f72f0d6fc84284c452f63176632177146de66",
        "nonce": "0",
        "blockHash": "0x4be19c278bfaead5cb0bc9476fa632e2447f6e6259e0303af210302d22779a24",
        "from": "0xb1690c08e213a35ed9bab7b318de14420fb57d8c",
        "contractAddress": "0x06012c8cf97bead5deae237070f9587f8e7a266d",
        "to": "0x6975be450864c02b4613023c2152ee0743572325",
        "tokenID": "202106",
        "tokenName": "CryptoKitties",
        "tokenSymbol": "CK",
        "tokenDecimal": "0",
        "transactionIndex": "81",
        "gas": "158820",
        "gasPrice": "40000000000",
        "gasUsed": "60508",
        "cumulativeGasUsed": "4880352",
        "input": "deprecated",
        "confirmations": "7990490",
    }
