import httpx
import pytest

from shapeshift_client.client import ShapeShiftClient
from shapeshift_client.config import ClientConfig, ServerConfig
from shapeshift_client.endpoints import Operation
from shapeshift_client.errors import (
    ApiError,
    InvalidArgumentError,
    MalformedResponseError,
    NotSupportedError,
    TransportError,
    UnknownPairError,
)
from shapeshift_client.models import MarketInfo, ValidateAddressResult


class DummyService:
    """Mock transport answering every request with a fixed JSON body."""

    def __init__(self, body=None, status_code=200, exc=None):
        self.body = body
        self.status_code = status_code
        self.exc = exc
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code, json=self.body)

    @property
    def paths(self):
        return [request.url.path for request in self.requests]


def make_client(service):
    config = ServerConfig(client=ClientConfig(base_url="https://shapeshift.test", timeout_seconds=1.0))
    return ShapeShiftClient(config=config, transport=httpx.MockTransport(service))


def test_get_rate():
    service = DummyService({"pair": "btc_eth", "rate": "0.5"})
    with make_client(service) as client:
        assert client.get_rate("BTC", "ETH") == 0.5
    assert service.paths == ["/rate/BTC_ETH"]
    assert service.requests[0].method == "GET"
    assert service.requests[0].url.host == "shapeshift.test"


def test_get_rate_unknown_pair():
    client = make_client(DummyService({"error": "Unknown pair"}))
    with pytest.raises(UnknownPairError):
        client.get_rate("BTC", "NOPE")


def test_get_rate_requires_both_coins():
    service = DummyService({"rate": "0.5"})
    client = make_client(service)
    with pytest.raises(InvalidArgumentError):
        client.get_rate("BTC", None)
    assert service.requests == []


def test_get_limit():
    service = DummyService({"pair": "btc_eth", "limit": "1.25"})
    assert make_client(service).get_limit("BTC", "ETH") == 1.25
    assert service.paths == ["/limit/BTC_ETH"]


def test_get_limit_generic_error():
    client = make_client(DummyService({"error": "server busy"}))
    with pytest.raises(ApiError) as excinfo:
        client.get_limit("BTC", "ETH")
    assert excinfo.value.message == "server busy"
    assert not isinstance(excinfo.value, UnknownPairError)


def test_get_market_info_for_pair():
    payload = {"pair": "btc_ltc", "rate": 130.1, "limit": 1.8, "minimum": 0.0001, "maxLimit": 1.8, "minerFee": 0.001}
    service = DummyService(payload)
    info = make_client(service).get_market_info("btc", "ltc")
    assert isinstance(info, MarketInfo)
    assert info.pair == "btc_ltc"
    assert info.rate == 130.1
    assert info.max_limit == 1.8
    assert info.miner_fee == 0.001
    assert info.markets == [info]
    assert service.paths == ["/marketinfo/btc_ltc"]


def test_get_market_info_for_all_markets():
    payload = [{"pair": "btc_ltc", "rate": 130.1}, {"pair": "ltc_btc", "rate": 0.0075}]
    service = DummyService(payload)
    info = make_client(service).get_market_info()
    assert service.paths == ["/marketinfo/"]
    assert info.pair is None
    assert [market.pair for market in info.markets] == ["btc_ltc", "ltc_btc"]


def test_get_market_info_half_pair():
    with pytest.raises(InvalidArgumentError):
        make_client(DummyService({})).get_market_info(coin2="ETH")


def test_get_time_remaining():
    service = DummyService({"status": "pending", "seconds_remaining": "600"})
    assert make_client(service).get_time_remaining("16FdfRFVPUwiKAceRSqgEfn1tmB4sVUmLh") == 600
    assert service.paths == ["/timeremaining/16FdfRFVPUwiKAceRSqgEfn1tmB4sVUmLh"]


def test_get_supported_coins():
    payload = {"BTC": {"name": "Bitcoin", "symbol": "BTC", "status": "available"}}
    service = DummyService(payload)
    assert make_client(service).get_supported_coins() == payload
    assert service.paths == ["/getcoins"]


def test_validate_address_normalizes_casing():
    service = DummyService({"isvalid": True})
    result = make_client(service).validate_address("1abc", "BTC")
    assert isinstance(result, ValidateAddressResult)
    assert result.is_valid is True
    assert result.error is None
    assert result.payload == {"isValid": True}
    assert "isvalid" not in result.payload
    assert service.paths == ["/validateAddress/1abc/BTC"]


def test_validate_address_does_not_raise_embedded_error():
    result = make_client(DummyService({"error": "bad checksum", "isvalid": False})).validate_address("1abc", "BTC")
    assert result.is_valid is False
    assert result.error == "bad checksum"
    assert result.payload == {"isValid": False, "error": "bad checksum"}


@pytest.mark.parametrize(
    "call",
    [
        lambda c: c.get_rate("BTC", "ETH"),
        lambda c: c.get_limit("BTC", "ETH"),
        lambda c: c.get_market_info("BTC", "ETH"),
        lambda c: c.get_time_remaining("1abc"),
        lambda c: c.get_supported_coins(),
        lambda c: c.validate_address("1abc", "BTC"),
    ],
)
def test_transport_failure_is_wrapped(call):
    cause = httpx.ConnectError("Connection refused")
    client = make_client(DummyService(exc=cause))
    with pytest.raises(TransportError) as excinfo:
        call(client)
    assert excinfo.value.__cause__ is cause
    assert "Connection refused" in excinfo.value.message
    assert excinfo.value.code is None


def test_http_status_failure_carries_code():
    client = make_client(DummyService({"error": "oops"}, status_code=503))
    with pytest.raises(TransportError) as excinfo:
        client.get_rate("BTC", "ETH")
    assert excinfo.value.code == 503


def test_non_json_body():
    def service(request):
        return httpx.Response(200, text="<html>maintenance</html>")

    client = ShapeShiftClient(transport=httpx.MockTransport(service))
    with pytest.raises(MalformedResponseError):
        client.get_supported_coins()


def test_missing_field():
    with pytest.raises(MalformedResponseError, match="rate"):
        make_client(DummyService({"pair": "btc_eth"})).get_rate("BTC", "ETH")


@pytest.mark.parametrize(
    "call,operation",
    [
        (lambda c: c.get_recent_transaction_list(10), Operation.GET_RECENT_TRANSACTIONS),
        (lambda c: c.get_status_of_deposit_to_address("1abc"), Operation.GET_DEPOSIT_STATUS),
        (lambda c: c.get_list_of_transactions_by_api_key("key"), Operation.GET_TRANSACTIONS_BY_API_KEY),
        (lambda c: c.get_transactions_by_output_address("1abc"), Operation.GET_TRANSACTIONS_BY_OUTPUT_ADDRESS),
    ],
)
def test_unsupported_operations_make_no_request(call, operation):
    service = DummyService({})
    client = make_client(service)
    with pytest.raises(NotSupportedError) as excinfo:
        call(client)
    assert excinfo.value.operation is operation
    assert service.requests == []
    assert not client.supports(operation)


def test_supports():
    assert ShapeShiftClient.supports(Operation.GET_RATE)
    assert ShapeShiftClient.supports(Operation.VALIDATE_ADDRESS)


def test_redirect_is_followed():
    def service(request):
        if request.url.path == "/marketinfo/":
            return httpx.Response(301, headers={"Location": "/marketinfo"})
        return httpx.Response(200, json=[{"pair": "btc_ltc", "rate": 130.1}])

    client = ShapeShiftClient(transport=httpx.MockTransport(service))
    info = client.get_market_info()
    assert [market.pair for market in info.markets] == ["btc_ltc"]


@pytest.mark.parametrize("address,raw_path", [
    ("abc#frag", b"/validateAddress/abc%23frag/BTC"),
    ("abc?x=1", b"/validateAddress/abc%3Fx%3D1/BTC"),
    ("abc/def", b"/validateAddress/abc%2Fdef/BTC"),
])
def test_address_is_escaped_as_one_segment(address, raw_path):
    service = DummyService({"isValid": True})
    make_client(service).validate_address(address, "BTC")
    assert service.requests[0].url.raw_path == raw_path
    assert service.requests[0].url.query == b""


def test_control_characters_do_not_escape_untyped():
    service = DummyService({"seconds_remaining": 5})
    assert make_client(service).get_time_remaining("abc\ndef") == 5
    assert service.requests[0].url.raw_path == b"/timeremaining/abc%0Adef"


def test_invalid_url_is_an_invalid_argument(monkeypatch):
    client = make_client(DummyService({}))

    def broken_get(path):
        raise httpx.InvalidURL("Invalid non-printable ASCII character in URL")

    monkeypatch.setattr(client._http, "get", broken_get)
    with pytest.raises(InvalidArgumentError) as excinfo:
        client.get_time_remaining("1abc")
    assert isinstance(excinfo.value.__cause__, httpx.InvalidURL)


def test_time_remaining_truncates_decimal_string():
    assert make_client(DummyService({"seconds_remaining": "600.0"})).get_time_remaining("1abc") == 600
