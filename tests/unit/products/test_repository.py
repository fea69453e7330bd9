"""Unit tests for ProductDjangoRepository.

Covers:
- Unfiltered look-ups (get_by_id, get_by_ids).
- Availability-filtered look-ups (count/list/get_available).
- Conditional writes (update_available) and creation.
"""

from __future__ import annotations

import pytest

from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.repositories.interfaces import IProductRepository

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo():
    return ProductDjangoRepository()


# ===========================================================================
# Instantiation
# ===========================================================================


class TestRepositoryInstantiation:
    def test_is_instance_of_interface(self, repo):
        assert isinstance(repo, IProductRepository)


# ===========================================================================
# Unfiltered look-ups
# ===========================================================================


class TestGetById:
    def test_returns_product_when_found(self, repo, make_product):
        product = make_product()
        assert repo.get_by_id(product.id) == product

    def test_returns_none_when_not_found(self, repo):
        assert repo.get_by_id(999_999) is None

    def test_returns_soft_deleted_product(self, repo, make_product):
        product = make_product(available=False)
        result = repo.get_by_id(product.id)
        assert result is not None
        assert result.available is False


class TestGetByIds:
    def test_returns_matching_products(self, repo, make_product):
        a = make_product(name="A")
        b = make_product(name="B")
        make_product(name="C")
        assert repo.get_by_ids([b.id, a.id]) == [a, b]

    def test_includes_soft_deleted_products(self, repo, make_product):
        gone = make_product(available=False)
        assert repo.get_by_ids([gone.id]) == [gone]

    def test_ignores_unknown_ids(self, repo, make_product):
        a = make_product()
        assert repo.get_by_ids([a.id, 999_999]) == [a]

    def test_empty_ids(self, repo, make_product):
        make_product()
        assert repo.get_by_ids([]) == []


# ===========================================================================
# create
# ===========================================================================


class TestCreate:
    def test_creates_available_product(self, repo):
        product = repo.create({"name": "Pen", "price": 1.5})
        assert product.id is not None
        assert product.available is True
        assert Product.objects.filter(id=product.id).exists()


# ===========================================================================
# Availability-filtered look-ups
# ===========================================================================


class TestAvailableQueries:
    def test_count_available(self, repo, make_product):
        make_product()
        make_product()
        make_product(available=False)
        assert repo.count_available() == 2

    def test_list_available_slices_by_id(self, repo, make_product):
        products = [make_product(name=f"P{i}") for i in range(5)]
        make_product(name="Gone", available=False)

        assert repo.list_available(offset=0, limit=2) == products[:2]
        assert repo.list_available(offset=2, limit=2) == products[2:4]
        assert repo.list_available(offset=4, limit=2) == products[4:]

    def test_list_available_past_the_end(self, repo, make_product):
        make_product()
        assert repo.list_available(offset=10, limit=10) == []

    def test_get_available(self, repo, make_product):
        product = make_product()
        assert repo.get_available(product.id) == product

    def test_get_available_hides_soft_deleted(self, repo, make_product):
        product = make_product(available=False)
        assert repo.get_available(product.id) is None


# ===========================================================================
# update_available
# ===========================================================================


class TestUpdateAvailable:
    def test_applies_changes(self, repo, make_product):
        product = make_product(name="Old", price=1.0)
        updated = repo.update_available(product.id, {"name": "New"})
        assert updated.name == "New"
        assert updated.price == 1.0
        product.refresh_from_db()
        assert product.name == "New"

    def test_refreshes_updated_at(self, repo, make_product):
        product = make_product()
        updated = repo.update_available(product.id, {"price": 2.0})
        assert updated.updated_at >= product.updated_at

    def test_empty_changes_still_returns_product(self, repo, make_product):
        product = make_product()
        assert repo.update_available(product.id, {}) == product

    def test_returns_none_for_unknown_id(self, repo):
        assert repo.update_available(999_999, {"name": "Ghost"}) is None

    def test_does_not_touch_soft_deleted_product(self, repo, make_product):
        product = make_product(name="Gone", available=False)
        assert repo.update_available(product.id, {"name": "Back"}) is None
        product.refresh_from_db()
        assert product.name == "Gone"
