# spotexchange

spotexchange provides the building blocks for a small spot exchange. It is written in plain Python and has no third-party dependencies.

- `spotexchange.spot` covers the spot market catalogue:
  - the `Market` model;
  - an in-memory market repository;
  - `SpotService`, which lists active markets by user role;
  - a mapper to wire messages (`MarketMessage`);
  - `SpotHandler`, which reports failures as `RpcError`.
- `spotexchange.order` covers orders:
  - the `Order`, `OrderType`, `OrderStatus` and `Market` models;
  - mappers between domain objects and wire messages (`OrderMessage`);
  - an in-memory order repository;
  - `MarketCheckerClient`, which fetches a market through a spot client.
- `spotexchange.interceptors` holds unary call interceptors for request ids, logging, exception recovery and metrics. `chain_interceptors` combines them.
- `spotexchange.status` holds `StatusCode`, the canonical status codes, and `RpcError`, which carries a code and a message.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Listing and fetching markets

```python
from spotexchange.spot.repository import InMemoryMarketRepository
from spotexchange.spot.service import SpotService
from spotexchange.spot.handler import SpotHandler, ViewMarketsRequest, GetMarketRequest

repository = InMemoryMarketRepository()
handler = SpotHandler(SpotService(repository))

response = handler.view_markets(ViewMarketsRequest(user_roles=["trader"]))
print(response.page_info.total_count)   # 2: btc_usd and eth_usd

market = handler.get_market(GetMarketRequest(market_id="btc_usd")).market
print(market.symbol, market.min_order_size)   # BTC_USD 0.0001
```

`InMemoryMarketRepository` starts with three markets:

- `btc_usd`, which is enabled;
- `eth_usd`, which is enabled;
- `old_token`, which is disabled and was marked deleted a year before the repository was created.

Every read from the repository returns copies.

`SpotService.view_markets` keeps a market only if both of these hold:

- it is active, meaning enabled and not deleted;
- its `allowed_roles` list is empty, or shares at least one role with the caller's roles.

`SpotHandler.get_market` raises `RpcError` in these cases:

| Situation | Status code |
|---|---|
| `market_id` is empty | `StatusCode.INVALID_ARGUMENT` |
| the id is unknown | `StatusCode.NOT_FOUND` |
| any other failure | `StatusCode.INTERNAL` |

Decimals appear in wire messages as plain strings without trailing zeros, for example `"100"` and `"0.01"`.

## Orders

```python
from decimal import Decimal
from spotexchange.order.domain import Order, OrderType
from spotexchange.order.mapper import to_proto_order, to_domain_order
from spotexchange.order.repository import InMemoryOrderRepository, OrderNotFoundError

order = Order(id="o-1", user_id="u-1", market_id="btc_usd",
              type=OrderType.BUY, price=Decimal("42000.50"), quantity=Decimal("0.25"))

orders = InMemoryOrderRepository()
orders.save(order)                 # stamps order.updated_at with the current UTC time
stored = orders.get_by_id("o-1")   # a copy of the stored order

message = to_proto_order(stored)   # price "42000.5", type "BUY", status "CREATED"
restored = to_domain_order(message)
```

These error rules apply:

- `InMemoryOrderRepository.save(None)` raises `ValueError`.
- `get_by_id` with an unknown id raises `OrderNotFoundError`.
- `to_domain_order` turns malformed decimal strings into zero.
- `to_domain_order` turns missing timestamps into the Unix epoch.
- `to_domain_order` raises `ValueError` for an unknown type or status name.

## Looking up a market from the order side

`MarketCheckerClient` wraps any object that has a `get_market(GetMarketRequest)` method returning a `GetMarketResponse`, and `SpotHandler` itself fits:

```python
from spotexchange.order.market_checker import MarketCheckerClient

checker = MarketCheckerClient(handler)
market = checker.get_market("eth_usd")   # spotexchange.order.domain.Market
print(market.is_active())                # True
```

Errors from the wrapped client propagate unchanged. A response without a market raises `LookupError`.

`MarketClient` is a protocol for objects that answer `check_market_active(market_id)`. The package defines the protocol but provides no implementation of it.

## Interceptors

An interceptor is a callable `(ctx, request, info, handler)`, where:

- `ctx` is a `CallContext`;
- `info` is a `CallInfo`;
- `handler` is a callable `(ctx, request)`.

```python
import logging
from spotexchange.interceptors import (
    CallContext, CallInfo, RequestMetrics, chain_interceptors,
    x_request_id, logger_interceptor, panic_recovery_interceptor, metrics_interceptor,
)
from spotexchange.status import StatusCode

logger = logging.getLogger("spot")
metrics = RequestMetrics()
intercept = chain_interceptors(
    x_request_id(),
    logger_interceptor(logger),
    panic_recovery_interceptor(logger),
    metrics_interceptor(metrics),
)

def handle(ctx, request):
    return ctx.outgoing_metadata["x-request-id"][0]

method = "/spot.v1.SpotInstrumentService/GetMarket"
result = intercept(CallContext(incoming_metadata={"x-request-id": ["req-1"]}),
                   {}, CallInfo(method), handle)
print(result)                                   # req-1
print(metrics.handled[(method, StatusCode.OK)])  # 1
```

The first interceptor given to `chain_interceptors` runs outermost. Each interceptor does the following:

- `x_request_id` copies the caller's `x-request-id` into the outgoing metadata, or generates a UUID when the caller sent none.
- `logger_interceptor` logs the start of the call, then its completion or failure with the duration.
- `panic_recovery_interceptor` re-raises `RpcError` unchanged. Any other exception is logged with its traceback and raised again as an `INTERNAL` `RpcError`.
- `metrics_interceptor` counts calls per method and status code in `RequestMetrics.handled`, and keeps durations per method in `RequestMetrics.durations`.

## What this package does not do

spotexchange is a library. It leaves out several things an exchange deployment would have:

- It has no command-line program.
- It has no network server or RPC transport. Handlers and interceptors are called directly.
- It has no metrics HTTP endpoint.
- It has no persistent storage. Both repositories keep their data in memory only.
- It has no order-placement service: there is nothing that creates, matches or fills orders.