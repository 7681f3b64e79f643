"""Unit tests for the Product aggregate and its status rules."""

import pytest

from catalog.application.dto import to_dto
from catalog.domain.exceptions import InvalidProductError, ValidationError
from catalog.domain.model.product import Product, ProductStatus
from catalog.domain.model.value_objects import Money, ProductId


def _make_product(name: str = "Widget", price: str = "25.99") -> Product:
    """Helper to build a valid product."""
    return Product.create(ProductId.of("p-1"), name, Money.of(price))


class TestProductCreation:

    @pytest.mark.parametrize("price", ["0", "0.00", "0.01", "25.99", "1000000"])
    def test_non_negative_price_is_active(self, price):
        assert _make_product(price=price).status == ProductStatus.ACTIVE

    @pytest.mark.parametrize("price", ["-0.01", "-10.0", "-99999"])
    def test_negative_price_is_inactive(self, price):
        product = _make_product(price=price)
        assert product.status == ProductStatus.INACTIVE
        assert product.price.is_negative()

    @pytest.mark.parametrize("name", ["", " ", "\t\n", None])
    @pytest.mark.parametrize("price", ["10", "-10"])
    def test_blank_name_rejected_regardless_of_price(self, name, price):
        with pytest.raises(InvalidProductError, match="name cannot be empty"):
            Product.create(ProductId.generate(), name, Money.of(price))

    def test_missing_price_rejected(self):
        with pytest.raises(InvalidProductError, match="price cannot be null"):
            Product.create(ProductId.generate(), "Widget", None)

    def test_invalid_product_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            Product.create(ProductId.generate(), "", Money.of("1"))

    def test_fields_kept(self):
        product = _make_product()
        assert product.id == ProductId.of("p-1")
        assert product.name == "Widget"
        assert product.price == Money.of("25.99")

    def test_projection(self):
        dto = to_dto(Product.create(ProductId.of("x-1"), "X", Money.of("10.00")))
        assert dto.as_dict() == {
            "id": "x-1",
            "name": "X",
            "price": Money.of("10.00").amount,
            "status": "ACTIVE",
        }


class TestProductUpdate:

    def test_name_and_price_replaced(self):
        product = _make_product()
        product.update(name="Gadget", price=Money.of("30"))
        assert product.name == "Gadget"
        assert product.price == Money.of("30.00")

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_blank_name_is_a_no_op(self, name):
        product = _make_product()
        product.update(name=name)
        assert product.name == "Widget"

    def test_price_only_leaves_name(self):
        product = _make_product()
        product.update(price=Money.of("1"))
        assert product.name == "Widget"
        assert product.price == Money.of("1")

    def test_negative_price_deactivates_active_product(self):
        product = _make_product()
        product.update(price=Money.of("-5"))
        assert product.status == ProductStatus.INACTIVE

    def test_negative_price_keeps_inactive_product_inactive(self):
        product = _make_product()
        product.deactivate()
        product.update(price=Money.of("-5"))
        assert product.status == ProductStatus.INACTIVE

    def test_positive_price_does_not_reactivate(self):
        product = _make_product(price="-1")
        product.update(price=Money.of("10"))
        assert product.status == ProductStatus.INACTIVE

    def test_id_never_changes(self):
        product = _make_product()
        product.update(name="Other", price=Money.of("-1"))
        product.deactivate()
        assert product.id == ProductId.of("p-1")


class TestProductActivation:

    def test_activate_inactive_product(self):
        product = _make_product()
        product.deactivate()
        product.activate()
        assert product.status == ProductStatus.ACTIVE

    def test_activate_is_idempotent(self):
        product = _make_product()
        product.activate()
        product.activate()
        assert product.status == ProductStatus.ACTIVE

    def test_activate_with_zero_price(self):
        product = _make_product(price="0")
        product.deactivate()
        product.activate()
        assert product.is_active

    def test_activate_negative_price_rejected(self):
        product = _make_product(price="-10.0")
        with pytest.raises(
            InvalidProductError, match="Cannot activate product with negative price"
        ):
            product.activate()
        assert product.status == ProductStatus.INACTIVE

    @pytest.mark.parametrize("price", ["10", "-10"])
    def test_deactivate_always_succeeds(self, price):
        product = _make_product(price=price)
        product.deactivate()
        assert product.status == ProductStatus.INACTIVE

    def test_deactivate_twice_same_as_once(self):
        once = _make_product()
        once.deactivate()
        twice = _make_product()
        twice.deactivate()
        twice.deactivate()
        assert once == twice
