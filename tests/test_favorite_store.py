"""Favorite store (propman.db.crud.favorites) against in-memory SQLite."""
import pytest
from sqlalchemy.exc import IntegrityError

from propman.db.crud import favorites as favorites_crud
from propman.models import PropertyFavorite
from tests.conftest import make_property, make_user


@pytest.fixture
def renter(db):
    return make_user(db)


@pytest.fixture
def props(db):
    return [make_property(db, title=f"Flat {i}") for i in range(3)]


def test_save_assigns_id_and_created_at(db, renter, props):
    fav = favorites_crud.save(db, PropertyFavorite(user_id=renter.id, property_id=props[0].id))
    assert fav.id is not None
    assert fav.created_at is not None
    assert fav.property.title == "Flat 0"


def test_find_by_user_is_insertion_ordered_and_scoped(db, renter, props):
    other = make_user(db)
    for p in (props[2], props[0], props[1]):
        favorites_crud.save(db, PropertyFavorite(user_id=renter.id, property_id=p.id))
    favorites_crud.save(db, PropertyFavorite(user_id=other.id, property_id=props[0].id))

    found = favorites_crud.find_by_user(db, renter.id)
    assert [f.property_id for f in found] == [props[2].id, props[0].id, props[1].id]
    assert all(f.user_id == renter.id for f in found)
    assert favorites_crud.find_by_user(db, 9999) == []


def test_find_and_exists_by_user_and_property(db, renter, props):
    assert favorites_crud.find_by_user_and_property(db, renter.id, props[0].id) is None
    assert favorites_crud.exists_by_user_and_property(db, renter.id, props[0].id) is False

    saved = favorites_crud.save(db, PropertyFavorite(user_id=renter.id, property_id=props[0].id))

    assert favorites_crud.find_by_user_and_property(db, renter.id, props[0].id).id == saved.id
    assert favorites_crud.exists_by_user_and_property(db, renter.id, props[0].id) is True
    assert favorites_crud.exists_by_user_and_property(db, renter.id, props[1].id) is False


def test_delete_by_user_and_property(db, renter, props):
    favorites_crud.save(db, PropertyFavorite(user_id=renter.id, property_id=props[0].id))

    assert favorites_crud.delete_by_user_and_property(db, renter.id, props[0].id) == 1
    db.commit()
    assert favorites_crud.exists_by_user_and_property(db, renter.id, props[0].id) is False
    # Nothing left to delete
    assert favorites_crud.delete_by_user_and_property(db, renter.id, props[0].id) == 0


def test_count_by_user(db, renter, props):
    assert favorites_crud.count_by_user(db, renter.id) == 0
    for p in props:
        favorites_crud.save(db, PropertyFavorite(user_id=renter.id, property_id=p.id))
    assert favorites_crud.count_by_user(db, renter.id) == 3


def test_unique_constraint_rejects_duplicate_pair(db, renter, props):
    favorites_crud.save(db, PropertyFavorite(user_id=renter.id, property_id=props[0].id))
    with pytest.raises(IntegrityError):
        favorites_crud.save(db, PropertyFavorite(user_id=renter.id, property_id=props[0].id))
    db.rollback()
    assert favorites_crud.count_by_user(db, renter.id) == 1


def test_favorite_maps_only_the_property_relationship():
    assert set(PropertyFavorite.__mapper__.relationships.keys()) == {"property"}
