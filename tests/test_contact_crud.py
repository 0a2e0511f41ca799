"""Tests for the contact repository against an in-memory SQLite database."""

from app.crud import contact_crud


def _seed(db):
    for name, favorite in [
        ("Ann Lee", 1),
        ("Joanna Smith", 0),
        ("Bob Stone", 1),
        ("ANNIE Hall", 0),
        ("Carl Park", 0),
    ]:
        contact_crud.create_from_dict(db, obj_in={"name": name, "favorite": favorite})


class TestListByFilter:
    def test_no_filters_returns_everything_in_id_order(self, db) -> None:
        _seed(db)
        contacts, total = contact_crud.list_by_filter(db, limit=100)
        assert total == 5
        assert [c.id for c in contacts] == sorted(c.id for c in contacts)

    def test_favorite_filter(self, db) -> None:
        _seed(db)
        contacts, total = contact_crud.list_by_filter(db, favorite=True, limit=100)
        assert total == 2
        assert all(c.favorite == 1 for c in contacts)

        contacts, total = contact_crud.list_by_filter(db, favorite=False, limit=100)
        assert total == 3
        assert all(c.favorite == 0 for c in contacts)

    def test_name_filter_is_case_insensitive_substring(self, db) -> None:
        _seed(db)
        contacts, total = contact_crud.list_by_filter(db, name="ann", limit=100)
        assert total == 3
        assert {c.name for c in contacts} == {"Ann Lee", "Joanna Smith", "ANNIE Hall"}

    def test_filters_combine(self, db) -> None:
        _seed(db)
        contacts, total = contact_crud.list_by_filter(db, name="ann", favorite=True, limit=100)
        assert total == 1
        assert contacts[0].name == "Ann Lee"

    def test_name_with_trailing_space_is_not_trimmed(self, db) -> None:
        _seed(db)
        contacts, total = contact_crud.list_by_filter(db, name="ann ", limit=100)
        assert total == 1
        assert contacts[0].name == "Ann Lee"

    def test_name_underscore_is_literal(self, db) -> None:
        _seed(db)
        contact_crud.create_from_dict(db, obj_in={"name": "snake_case"})
        contacts, total = contact_crud.list_by_filter(db, name="e_c", limit=100)
        assert total == 1
        assert contacts[0].name == "snake_case"

    def test_blank_name_is_ignored(self, db) -> None:
        _seed(db)
        _, total = contact_crud.list_by_filter(db, name="   ", limit=100)
        assert total == 5

    def test_page_offset(self, db) -> None:
        _seed(db)
        first, total = contact_crud.list_by_filter(db, page=1, limit=2)
        third, _ = contact_crud.list_by_filter(db, page=3, limit=2)
        beyond, _ = contact_crud.list_by_filter(db, page=4, limit=2)
        assert total == 5
        assert len(first) == 2
        assert len(third) == 1
        assert beyond == []
        assert third[0].id not in {c.id for c in first}


class TestWrites:
    def test_create_assigns_id_and_default_favorite(self, db) -> None:
        contact = contact_crud.create_from_dict(db, obj_in={"name": "Dana"})
        assert contact.id is not None
        assert contact.favorite == 0
        assert contact_crud.get(db, contact.id).name == "Dana"

    def test_get_missing_returns_none(self, db) -> None:
        assert contact_crud.get(db, 12345) is None

    def test_update_only_touches_given_fields(self, db) -> None:
        contact = contact_crud.create_from_dict(
            db, obj_in={"name": "Eve", "email": "eve@example.com", "phone": "123"}
        )
        contact_crud.update(db, db_obj=contact, obj_in={"phone": "999"})
        reloaded = contact_crud.get(db, contact.id)
        assert reloaded.phone == "999"
        assert reloaded.email == "eve@example.com"
        assert reloaded.name == "Eve"

    def test_delete_by_id_reports_count(self, db) -> None:
        contact = contact_crud.create_from_dict(db, obj_in={"name": "Finn"})
        assert contact_crud.delete_by_id(db, contact_id=contact.id) == 1
        assert contact_crud.delete_by_id(db, contact_id=contact.id) == 0
        assert contact_crud.get(db, contact.id) is None

    def test_delete_all_reports_count(self, db) -> None:
        _seed(db)
        assert contact_crud.delete_all(db) == 5
        assert contact_crud.delete_all(db) == 0
        _, total = contact_crud.list_by_filter(db)
        assert total == 0

    def test_list_avatars_skips_contacts_without_one(self, db) -> None:
        contact_crud.create_from_dict(db, obj_in={"name": "A", "avatar": "/public/uploads/a.png"})
        contact_crud.create_from_dict(db, obj_in={"name": "B"})
        assert contact_crud.list_avatars(db) == ["/public/uploads/a.png"]
