# /tests/test_catalog_service.py

import pytest
from datetime import datetime, timedelta
from sqlalchemy.exc import OperationalError

from bookstore.services import catalog_service
from bookstore.services.catalog_errors import CONSTRAINT_FAILURE_MESSAGE, GENERIC_FAILURE_MESSAGE, UnexpectedError


# --- Test Data Fixtures ---

@pytest.fixture
def catalog(db_service):
    """
    The example catalog: one category, one author and one book linked to
    that author.
    """
    category_id, _ = catalog_service.add_category(db_service, "Programming")
    author_id, _ = catalog_service.add_author(db_service, "Emily", "Vander", "Veer")
    isbn, _ = catalog_service.add_book(db_service, "0764576593", "JavaScript for dummies", 387, 2005, category_id)
    catalog_service.add_author_book(db_service, author_id, isbn)
    return {"category_id": category_id, "author_id": author_id, "isbn": isbn}


# --- Authors ---

def test_add_author_round_trip(db_service):
    author_id, error = catalog_service.add_author(db_service, "Emily", "Vander", "Veer")

    assert error is None
    assert author_id > 0
    saved = db_service.get_author_by_id(author_id)
    assert (saved.firstname, saved.surname, saved.surname2) == ("Emily", "Vander", "Veer")


@pytest.mark.parametrize("firstname", ["", "   ", None])
def test_add_author_without_first_name_is_rejected(db_service, firstname):
    author_id, error = catalog_service.add_author(db_service, firstname, "Vander")

    assert author_id is None
    assert "First" in error
    assert db_service.find_authors() == []


def test_add_author_without_surname_is_rejected(db_service):
    author_id, error = catalog_service.add_author(db_service, "Emily", "")

    assert author_id is None
    assert error == "Surname is required"


def test_add_author_rejects_over_long_names(db_service):
    author_id, error = catalog_service.add_author(db_service, "E" * 129, "Vander")

    assert author_id is None
    assert error == "First name must be at most 128 characters"


def test_get_authors_defaults_to_everything(db_service):
    for first, last in [("John", "Doe"), ("Jane", "Smith"), ("Bob", "Johnson")]:
        catalog_service.add_author(db_service, first, last)

    authors = catalog_service.get_authors(db_service)

    assert {(a.firstname, a.surname) for a in authors} == {("John", "Doe"), ("Jane", "Smith"), ("Bob", "Johnson")}


def test_get_authors_uses_substring_matching(db_service):
    catalog_service.add_author(db_service, "John", "Doe")
    catalog_service.add_author(db_service, "Jane", "Smith")

    assert [a.firstname for a in catalog_service.get_authors(db_service, firstname="oh")] == ["John"]
    assert [a.surname for a in catalog_service.get_authors(db_service, "%", "Smi")] == ["Smith"]
    assert catalog_service.get_authors(db_service, firstname="Joh", surname="Smith") == []


def test_get_authors_wraps_storage_failures(db_service, monkeypatch, log_messages):
    def broken_find(**kwargs):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(db_service, "find_authors", broken_find)

    with pytest.raises(UnexpectedError) as exc_info:
        catalog_service.get_authors(db_service)

    assert str(exc_info.value) == GENERIC_FAILURE_MESSAGE
    assert any("Error retrieving authors" in m for m in log_messages)


def test_modify_author_overwrites_all_fields(db_service):
    author_id, _ = catalog_service.add_author(db_service, "John", "Doe", "Smith")

    success, error = catalog_service.modify_author(db_service, author_id, "Steven", "W.")

    assert (success, error) == (True, None)
    updated = db_service.get_author_by_id(author_id)
    assert (updated.firstname, updated.surname) == ("Steven", "W.")
    assert updated.surname2 is None


def test_modify_missing_author_changes_nothing(db_service):
    author_id, _ = catalog_service.add_author(db_service, "John", "Doe")

    assert catalog_service.modify_author(db_service, author_id + 1, "Steven", "W.") == (False, "Author not found")
    assert db_service.get_author_by_id(author_id).firstname == "John"


def test_delete_author_is_not_repeatable(db_service):
    author_id, _ = catalog_service.add_author(db_service, "John", "Doe")

    assert catalog_service.delete_author(db_service, author_id) == (True, None)
    assert db_service.get_author_by_id(author_id) is None
    assert catalog_service.delete_author(db_service, author_id) == (False, "Author not found")
    assert catalog_service.delete_author(db_service, author_id) == (False, "Author not found")


def test_delete_author_removes_links_but_keeps_books(db_service, catalog):
    assert catalog_service.delete_author(db_service, catalog["author_id"]) == (True, None)

    assert db_service.get_author_books_by_isbn(catalog["isbn"]) == []
    rows = catalog_service.get_books(db_service, isbn=catalog["isbn"])
    assert len(rows) == 1
    assert rows[0].author == ""


# --- Books ---

def test_add_book_echoes_isbn(db_service):
    isbn, error = catalog_service.add_book(db_service, "9780134685991", "Effective Java", 412, 2018)

    assert (isbn, error) == ("9780134685991", None)
    saved = db_service.get_book_by_isbn("9780134685991")
    assert (saved.title, saved.pages, saved.year, saved.category_id) == ("Effective Java", 412, 2018, None)


def test_add_book_with_existing_isbn_is_a_conflict(db_service):
    catalog_service.add_book(db_service, "9780134685991", "Effective Java")

    isbn, error = catalog_service.add_book(db_service, "9780134685991", "Something Else")

    assert isbn is None
    assert "already exists" in error
    assert db_service.get_book_by_isbn("9780134685991").title == "Effective Java"


@pytest.mark.parametrize("isbn,title,expected", [
    ("", "Title", "ISBN is required"),
    ("9780134685991", "", "Title is required"),
    ("97801346859910", "Title", "ISBN must be at most 13 characters"),
])
def test_add_book_validation(db_service, isbn, title, expected):
    assert catalog_service.add_book(db_service, isbn, title) == (None, expected)


def test_add_book_with_unknown_category_is_a_constraint_error(db_service, log_messages):
    isbn, error = catalog_service.add_book(db_service, "9780134685991", "Effective Java", category_id=42)

    assert isbn is None
    assert error == CONSTRAINT_FAILURE_MESSAGE
    assert db_service.get_book_by_isbn("9780134685991") is None
    assert any("Error adding book with ISBN: 9780134685991" in m for m in log_messages)


def test_modify_book_overwrites_and_clears(db_service, catalog):
    success, error = catalog_service.modify_book(db_service, catalog["isbn"], "JavaScript for Dummies", 400)

    assert (success, error) == (True, None)
    book = db_service.get_book_by_isbn(catalog["isbn"])
    assert (book.title, book.pages, book.year, book.category_id) == ("JavaScript for Dummies", 400, None, None)


def test_modify_missing_book(db_service):
    assert catalog_service.modify_book(db_service, "0000000000", "Nothing") == (False, "Book not found")


def test_delete_book_removes_book_and_all_links(db_service, catalog):
    second_author, _ = catalog_service.add_author(db_service, "Jane", "Smith")
    catalog_service.add_author_book(db_service, second_author, catalog["isbn"])
    assert len(db_service.get_author_books_by_isbn(catalog["isbn"])) == 2

    assert catalog_service.delete_book(db_service, catalog["isbn"]) == (True, None)

    assert db_service.get_book_by_isbn(catalog["isbn"]) is None
    assert db_service.get_author_book(catalog["author_id"], catalog["isbn"]) is None
    assert db_service.get_author_book(second_author, catalog["isbn"]) is None
    assert db_service.get_author_by_id(catalog["author_id"]) is not None
    assert db_service.get_author_by_id(second_author) is not None


def test_delete_missing_book(db_service):
    assert catalog_service.delete_book(db_service, "0000000000") == (False, "Book not found")


def test_delete_book_failure_rolls_back_link_removal(db_service, catalog, monkeypatch, log_messages):
    def failing_delete(book):
        raise OperationalError("DELETE", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db_service, "delete_book", failing_delete)

    success, error = catalog_service.delete_book(db_service, catalog["isbn"])

    assert success is False
    assert error == GENERIC_FAILURE_MESSAGE
    assert "disk I/O" not in error
    assert db_service.get_book_by_isbn(catalog["isbn"]) is not None
    assert len(db_service.get_author_books_by_isbn(catalog["isbn"])) == 1
    assert any("Error deleting book with ISBN: 0764576593" in m for m in log_messages)


# --- Book listing ---

def test_get_books_example_scenario(db_service, catalog):
    assert catalog == {"category_id": 1, "author_id": 1, "isbn": "0764576593"}

    rows = catalog_service.get_books(db_service, "0764576593", "%")

    assert [row.model_dump() for row in rows] == [{
        "isbn": "0764576593",
        "title": "JavaScript for dummies",
        "pages": 387,
        "year": 2005,
        "category": "Programming",
        "author": "Vander, Emily",
    }]


def test_get_books_one_row_per_author_link(db_service, catalog):
    second_author, _ = catalog_service.add_author(db_service, "Jane", "Smith")
    catalog_service.add_author_book(db_service, second_author, catalog["isbn"])
    catalog_service.add_book(db_service, "1111111111", "Authorless")

    rows = catalog_service.get_books(db_service)

    linked = [row for row in rows if row.isbn == catalog["isbn"]]
    assert sorted(row.author for row in linked) == ["Smith, Jane", "Vander, Emily"]
    assert linked[0].model_dump(exclude={"author"}) == linked[1].model_dump(exclude={"author"})

    authorless = [row for row in rows if row.isbn == "1111111111"]
    assert len(authorless) == 1
    assert authorless[0].author == ""
    assert authorless[0].category == ""


def test_get_books_filters_by_title_substring(db_service, catalog):
    catalog_service.add_book(db_service, "1111111111", "Python Crash Course")

    assert [row.isbn for row in catalog_service.get_books(db_service, title="Crash")] == ["1111111111"]
    assert catalog_service.get_books(db_service, isbn="0764", title="Crash") == []


# --- Categories ---

def test_add_category(db_service):
    category_id, error = catalog_service.add_category(db_service, "Programming")

    assert error is None
    assert category_id > 0
    assert db_service.get_category_by_id(category_id).category_name == "Programming"


def test_add_duplicate_category_is_rejected(db_service):
    catalog_service.add_category(db_service, "Programming")

    category_id, error = catalog_service.add_category(db_service, "Programming")

    assert category_id is None
    assert "already exists" in error


def test_add_category_requires_a_name(db_service):
    assert catalog_service.add_category(db_service, "") == (None, "Category name is required")


# --- Author-book links ---

def test_add_author_book(db_service):
    author_id, _ = catalog_service.add_author(db_service, "John", "Doe")
    catalog_service.add_book(db_service, "0764576593", "Test Book")

    before = datetime.now()
    assert catalog_service.add_author_book(db_service, author_id, "0764576593") == (True, None)

    link = db_service.get_author_book(author_id, "0764576593")
    assert link is not None
    assert link.created >= before


def test_add_author_book_with_unknown_author(db_service, log_messages):
    catalog_service.add_book(db_service, "0764576593", "Test Book")

    success, error = catalog_service.add_author_book(db_service, 999, "0764576593")

    assert success is False
    assert error == CONSTRAINT_FAILURE_MESSAGE
    assert db_service.get_author_books_by_isbn("0764576593") == []
    assert any("AuthorId=999" in m for m in log_messages)


def test_add_author_book_with_unknown_book(db_service):
    author_id, _ = catalog_service.add_author(db_service, "John", "Doe")

    success, error = catalog_service.add_author_book(db_service, author_id, "0000000000")

    assert success is False
    assert error == CONSTRAINT_FAILURE_MESSAGE


def test_modify_author_book_refreshes_timestamp(db_service, catalog):
    link = db_service.get_author_book(catalog["author_id"], catalog["isbn"])
    yesterday = datetime.now() - timedelta(days=1)
    with db_service.unit_of_work():
        db_service.update_author_book(link, {"created": yesterday})

    assert catalog_service.modify_author_book(db_service, catalog["author_id"], catalog["isbn"]) == (True, None)

    assert db_service.get_author_book(catalog["author_id"], catalog["isbn"]).created > yesterday


def test_modify_missing_author_book(db_service, catalog):
    success, error = catalog_service.modify_author_book(db_service, catalog["author_id"], "0000000000")

    assert success is False
    assert "not found" in error
