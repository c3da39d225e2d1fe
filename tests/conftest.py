"""
Pytest configuration and fixtures.
"""
from decimal import Decimal

import jwt
import pytest
from fastapi.testclient import TestClient

from order_cart.domain.cart import Product
from order_cart.domain.errors import ProductLookupTimeout
from order_cart.main import create_app
from order_cart.repos import CartStore, MemoryCartStore, RedisCartStore, SqlCartStore
from order_cart.services.cart_service import CartService
from order_cart.services.token_verifier import TokenVerifier

JWT_TEST_SECRET = "test-secret"


class FakeCatalog:
    """In-memory ProductLookup whose products can be edited mid-test."""

    def __init__(self):
        self.products = {
            "P1": Product(id="P1", name="Widget", price=Decimal("10.00"), description="A widget"),
            "P2": Product(id="P2", name="Gadget", price=Decimal("5.50")),
            "P3": Product(id="P3", name="Gizmo", price=Decimal("2.25"), image_url="http://img/p3.png"),
        }
        self.timeouts = set()
        self.calls = []

    def get_product(self, product_id):
        self.calls.append(product_id)
        if product_id in self.timeouts:
            raise ProductLookupTimeout(product_id)
        product = self.products.get(product_id)
        return product.model_copy() if product else None

    def change(self, product_id, **fields):
        self.products[product_id] = self.products[product_id].model_copy(update=fields)


class DelegatingStore(CartStore):
    """Wraps a store so tests can run code between the read and the write."""

    def __init__(self, inner: CartStore, before_write=None):
        self.inner = inner
        self.before_write = before_write
        self.gets = 0
        self.writes = 0

    def _hook(self):
        if self.before_write is not None:
            hook, self.before_write = self.before_write, None
            hook()

    def get(self, owner):
        self.gets += 1
        return self.inner.get(owner)

    def create(self, cart):
        self._hook()
        self.writes += 1
        return self.inner.create(cart)

    def update(self, cart, expected_version):
        self._hook()
        self.writes += 1
        return self.inner.update(cart, expected_version)

    def delete(self, owner):
        return self.inner.delete(owner)


@pytest.fixture
def catalog():
    return FakeCatalog()


@pytest.fixture
def memory_store():
    return MemoryCartStore()


@pytest.fixture
def sql_store(tmp_path):
    store = SqlCartStore(f"sqlite:///{tmp_path / 'carts.db'}")
    store.open()
    yield store
    store.close()


@pytest.fixture
def redis_store():
    fakeredis = pytest.importorskip("fakeredis")
    pytest.importorskip("lupa")
    store = RedisCartStore(client=fakeredis.FakeRedis(decode_responses=True))
    store.open()
    yield store
    store.close()


@pytest.fixture(params=["memory", "sql", "redis"])
def store(request):
    return request.getfixturevalue(f"{request.param}_store")


@pytest.fixture
def cart_service(store, catalog):
    return CartService(store=store, product_lookup=catalog)


@pytest.fixture
def make_token():
    def _make(owner="U1", **claims):
        payload = {"usuarioId": owner, **claims}
        return jwt.encode(payload, JWT_TEST_SECRET, algorithm="HS256")

    return _make


@pytest.fixture
def auth_headers(make_token):
    def _headers(owner="U1"):
        return {"Authorization": f"Bearer {make_token(owner)}"}

    return _headers


@pytest.fixture
def test_client(catalog, memory_store):
    app = create_app(
        cart_store=memory_store,
        product_lookup=catalog,
        token_verifier=TokenVerifier(secret=JWT_TEST_SECRET, algorithm="HS256", owner_claim="usuarioId"),
    )
    with TestClient(app) as client:
        yield client
