"""Product Request Schemas - one typed request per GraphQL operation.

Invariants:
    - ProductLookup.id is None when the client sent no id (lookup yields null)
    - ProductCreate.info defaults to "" (never None)
    - ProductUpdate.changes() contains only fields supplied with a non-null value

Design Decisions:
    - from_arguments drops None values before validation, so explicit `null`
      and an omitted argument mean the same thing: leave the field unchanged
    - No range or length checks: the engine already coerced types, nothing more
"""

from pydantic import BaseModel

from product_api.core.domain_types import ProductId


class ProductLookup(BaseModel):
    """Arguments of Query.product."""
    id: ProductId | None = None


class ProductCreate(BaseModel):
    """Arguments of Mutation.create."""
    name: str
    info: str = ""
    price: float

    @classmethod
    def from_arguments(
        cls, name: str, price: float, info: str | None = None,
    ) -> "ProductCreate":
        if info is None:
            return cls(name=name, price=price)
        return cls(name=name, info=info, price=price)


class ProductUpdate(BaseModel):
    """Arguments of Mutation.update."""
    id: ProductId
    name: str | None = None
    info: str | None = None
    price: float | None = None

    @classmethod
    def from_arguments(cls, id: int, **fields: object) -> "ProductUpdate":
        return cls(id=id, **{k: v for k, v in fields.items() if v is not None})

    def changes(self) -> dict[str, object]:
        """Supplied fields only, ready for ProductStore.update."""
        return {
            name: getattr(self, name)
            for name in sorted(self.model_fields_set) if name != "id"
        }


class ProductDelete(BaseModel):
    """Arguments of Mutation.delete."""
    id: ProductId
