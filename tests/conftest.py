"""Shared pytest fixtures for library-archive tests."""

from datetime import date

import pytest

from library_archive import Book, CatalogArchive, Magazine, Periodicity, User


@pytest.fixture
def archive_path(tmp_path):
    """Path for an archive file that does not exist yet."""
    return tmp_path / "archive.db"


@pytest.fixture
def tolkien_book():
    return Book(
        isbn="978-3-16-148410-0",
        title="The Lord of the Rings",
        publication_year=1954,
        author="J.R.R. Tolkien",
        genre="Fantasy",
        num_pages=1178,
    )


@pytest.fixture
def tolkien_sequel():
    return Book(
        isbn="975-3-15-148410-0",
        title="The Lord of the Rings 2",
        publication_year=1954,
        author="J.R.R. Tolkien",
        genre="Fantasy",
        num_pages=1179,
    )


@pytest.fixture
def magazine():
    return Magazine(
        isbn="123-456-789",
        title="National Geographic",
        publication_year=2024,
        issue_number=4,
        periodicity=Periodicity.MONTHLY,
    )


@pytest.fixture
def archive(tolkien_book, magazine, tolkien_sequel):
    """Archive holding a book, a magazine and a second book, in that order."""
    archive = CatalogArchive()
    archive.add(tolkien_book)
    archive.add(magazine)
    archive.add(tolkien_sequel)
    return archive


@pytest.fixture
def member():
    return User(
        first_name="Ada",
        last_name="Reader",
        birth_date=date(1990, 6, 1),
        membership_id="M1",
    )
