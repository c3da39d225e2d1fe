# order_cart/repos/sql_cart_store.py
from decimal import Decimal

from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from order_cart.data.database import Base, make_engine, make_session_factory
from order_cart.data.models.cart import CartModel
from order_cart.domain.cart import Cart, CartItem
from order_cart.domain.errors import ConcurrentModification
from order_cart.repos.cart_store import CartStore
from order_cart.utils.logging import get_logger
from order_cart.utils.settings import DATABASE_URL

logger = get_logger(__name__)


def _dump_items(cart: Cart) -> list[dict]:
    return [i.model_dump(mode="json") for i in cart.items]


class SqlCartStore(CartStore):
    """
    -one row per owner, items kept as a JSON document
    -optimistic locking on the version column
    """

    def __init__(self, url: str | None = None):
        self.url = url or DATABASE_URL
        self.engine = None
        self.SessionLocal: sessionmaker | None = None

    def open(self) -> None:
        self.engine = make_engine(self.url)
        Base.metadata.create_all(bind=self.engine)
        self.SessionLocal = make_session_factory(self.engine)
        logger.info(f"SqlCartStore opened, tables: {list(Base.metadata.tables.keys())}")

    def close(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
            logger.info("SqlCartStore closed")
        self.engine = None
        self.SessionLocal = None

    def _session(self) -> Session:
        if self.SessionLocal is None:
            raise RuntimeError("SqlCartStore is not open")
        return self.SessionLocal()

    def get(self, owner: str) -> Cart | None:
        with self._session() as db:
            row = db.get(CartModel, owner)
            if row is None:
                return None
            return Cart(
                owner=row.owner,
                items=[CartItem.model_validate(i) for i in row.items],
                total=Decimal(row.total),
                updated_at=row.updated_at,
                version=row.version,
            )

    def create(self, cart: Cart) -> Cart:
        row = CartModel(
            owner=cart.owner,
            items=_dump_items(cart),
            total=str(cart.total),
            updated_at=cart.updated_at,
            version=1,
        )

        with self._session() as db:
            db.add(row)
            try:
                db.commit()
            except IntegrityError:
                #another request created this owner's cart first
                db.rollback()
                raise ConcurrentModification(cart.owner, expected_version=0)

        logger.info(f"Created cart for owner {cart.owner}")
        return cart.model_copy(update={"version": 1}, deep=True)

    def update(self, cart: Cart, expected_version: int) -> Cart:
        new_version = expected_version + 1

        with self._session() as db:
            #e.g. UPDATE carts SET ..., version=4 WHERE owner='u1' AND version=3
            result = db.execute(
                update(CartModel)
                .where(
                    CartModel.owner == cart.owner,
                    CartModel.version == expected_version,
                )
                .values(
                    items=_dump_items(cart),
                    total=str(cart.total),
                    updated_at=cart.updated_at,
                    version=new_version,
                )
            )

            if result.rowcount == 0:
                db.rollback()
                raise ConcurrentModification(cart.owner, expected_version)

            db.commit()

        logger.info(f"Updated cart for owner {cart.owner}, version {new_version}")
        return cart.model_copy(update={"version": new_version}, deep=True)

    def delete(self, owner: str) -> None:
        with self._session() as db:
            db.execute(delete(CartModel).where(CartModel.owner == owner))
            db.commit()
        logger.info(f"Deleted cart for owner {owner}")
