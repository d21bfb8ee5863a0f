"""
Tests for AuthService and ItemService against the in-memory store.
"""

import pytest

from itemvault.core.errors import AuthError, ConflictError, NotFoundError, ValidationError
from itemvault.db.records import new_id
from itemvault.services.auth_service import AuthService
from itemvault.services.item_service import ItemService, coerce_price


@pytest.fixture
def auth(memory_store, hasher, signer):
	return AuthService(memory_store, hasher, signer)

@pytest.fixture
def items(memory_store):
	return ItemService(memory_store)


class TestAuthService:
	def test_register_then_login_token_carries_user_id(self, auth, signer, memory_store):
		auth.register("a@example.com", "password123")
		token = auth.login("a@example.com", "password123")
		user = memory_store.find_user("a@example.com")
		assert signer.verify(token) == user.id

	def test_password_is_not_stored_in_clear(self, auth, memory_store):
		auth.register("a@example.com", "password123")
		assert memory_store.find_user("a@example.com").password_hash != "password123"

	@pytest.mark.parametrize("email,password", [(None, "pw"), ("a@example.com", None), ("", "pw"), ("a@example.com", "")])
	def test_register_requires_both_fields(self, auth, email, password):
		with pytest.raises(ValidationError):
			auth.register(email, password)

	def test_duplicate_email_conflicts(self, auth, memory_store):
		first = auth.register("a@example.com", "password123")
		with pytest.raises(ConflictError):
			auth.register("a@example.com", "other-password")
		assert memory_store.find_user("a@example.com").id == first.id

	def test_email_is_case_sensitive(self, auth, memory_store):
		lower = auth.register("a@example.com", "password123")
		upper = auth.register("A@example.com", "password123")
		assert lower.id != upper.id
		assert memory_store.find_user("A@example.com") == upper

	@pytest.mark.parametrize("email,password", [("s@example.com", "\ud800abc"), ("\udfff@example.com", "password123"), (42, "password123")])
	def test_rejects_unencodable_credentials(self, auth, memory_store, email, password):
		with pytest.raises(ValidationError):
			auth.register(email, password)
		with pytest.raises(ValidationError):
			auth.login(email, password)

	def test_login_requires_both_fields(self, auth):
		with pytest.raises(ValidationError):
			auth.login("a@example.com", None)

	def test_unknown_email_and_wrong_password_look_the_same(self, auth):
		auth.register("a@example.com", "password123")
		with pytest.raises(AuthError) as unknown:
			auth.login("b@example.com", "password123")
		with pytest.raises(AuthError) as wrong:
			auth.login("a@example.com", "wrong-password")
		assert unknown.value.message == wrong.value.message
		assert unknown.value.status_code == wrong.value.status_code == 401


class TestCoercePrice:
	@pytest.mark.parametrize("value,expected", [(100, 100.0), (19.5, 19.5), ("12.5", 12.5), (" 7 ", 7.0), (0, 0.0)])
	def test_accepts_numbers(self, value, expected):
		assert coerce_price(value) == expected

	@pytest.mark.parametrize("value", [None, "abc", "", True, [1], {"v": 1}, "nan", float("inf"), 10 ** 400, "\ud800"])
	def test_rejects_non_numbers(self, value):
		with pytest.raises(ValidationError):
			coerce_price(value)


class TestItemService:
	def test_create_sets_owner(self, items):
		owner = new_id()
		item = items.create(owner, "Test Item", 100)
		assert item.owner_id == owner
		assert item.name == "Test Item"
		assert item.price == 100.0

	@pytest.mark.parametrize("name,price", [(None, 1), ("", 1), ("x", None), ("x", "abc"), ("\ud800", 1), (7, 1), ("x", 10 ** 400)])
	def test_create_validation(self, items, name, price):
		with pytest.raises(ValidationError):
			items.create(new_id(), name, price)

	def test_list_is_scoped_to_owner(self, items):
		alice, bob = new_id(), new_id()
		first = items.create(alice, "one", 1)
		second = items.create(alice, "two", 2)
		items.create(bob, "three", 3)
		assert [i.id for i in items.list(alice)] == [first.id, second.id]
		assert all(i.owner_id == bob for i in items.list(bob))
		assert items.list(new_id()) == []

	def test_update_merges_and_keeps_owner(self, items):
		owner = new_id()
		item = items.create(owner, "Test Item", 100)
		updated = items.update(owner, item.id, {"price": 200, "ownerId": new_id(), "owner_id": new_id()})
		assert updated.name == "Test Item"
		assert updated.price == 200.0
		assert updated.owner_id == owner
		assert updated.id == item.id

	def test_update_with_empty_patch_returns_item(self, items):
		owner = new_id()
		item = items.create(owner, "Test Item", 100)
		assert items.update(owner, item.id, {}) == item

	def test_update_rejects_bad_price(self, items):
		owner = new_id()
		item = items.create(owner, "Test Item", 100)
		with pytest.raises(ValidationError):
			items.update(owner, item.id, {"price": "lots"})
		with pytest.raises(ValidationError):
			items.update(owner, item.id, {"price": 10 ** 400})
		with pytest.raises(ValidationError):
			items.update(owner, item.id, {"name": "\ud800"})
		assert items.get(owner, item.id).price == 100.0

	def test_foreign_and_missing_items_are_not_found(self, items):
		alice, bob = new_id(), new_id()
		item = items.create(alice, "Test Item", 100)
		for item_id in (item.id, new_id(), "not-an-id"):
			with pytest.raises(NotFoundError):
				items.update(bob, item_id, {"name": "stolen"})
			with pytest.raises(NotFoundError):
				items.delete(bob, item_id)
			with pytest.raises(NotFoundError):
				items.get(bob, item_id)
		assert items.get(alice, item.id) == item

	def test_delete_removes_item(self, items):
		owner = new_id()
		item = items.create(owner, "Test Item", 100)
		items.delete(owner, item.id)
		assert items.list(owner) == []
		with pytest.raises(NotFoundError):
			items.delete(owner, item.id)
