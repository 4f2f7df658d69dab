from library_graph_api.app.core.store import AuthorRecord, BookRecord, Collection, LibraryStore


def test_sample_data_is_seeded_in_order():
    store = LibraryStore.with_sample_data()
    assert [a.name for a in store.authors.all()] == ["J. K. Rowling", "J. R. R. Tolkien", "Brent Weeks"]
    assert len(store.books) == 8
    assert store.books.all()[3] == BookRecord(id=4, name="The Fellowship of the Ring", author_id=2)


def test_empty_store():
    store = LibraryStore()
    assert store.authors.all() == []
    assert store.books.all() == []
    assert store.books.allocate_id() == 1


def test_find_by_id_and_index():
    books = LibraryStore.with_sample_data().books
    assert books.find_by_id(5).name == "The Two Towers"
    assert books.find_by_id(99) is None
    assert books.find_index_by_id(1) == 0
    assert books.find_index_by_id(99) is None


def test_remove_at_returns_removed_record():
    authors = Collection([AuthorRecord(1, "A"), AuthorRecord(2, "B")])
    removed = authors.remove_at(0)
    assert removed == AuthorRecord(1, "A")
    assert authors.all() == [AuthorRecord(2, "B")]


def test_allocate_id_never_reuses_after_removal():
    authors = Collection([AuthorRecord(1, "A"), AuthorRecord(2, "B"), AuthorRecord(3, "C")])
    authors.remove_at(authors.find_index_by_id(2))
    new_id = authors.allocate_id()
    assert new_id == 4
    assert new_id not in [a.id for a in authors.all()]


def test_append_with_explicit_id_moves_counter_forward():
    authors = Collection()
    authors.append(AuthorRecord(10, "A"))
    assert authors.allocate_id() == 11


def test_all_returns_snapshot():
    authors = Collection([AuthorRecord(1, "A")])
    snapshot = authors.all()
    snapshot.append(AuthorRecord(2, "B"))
    assert len(authors) == 1


def test_filter_keeps_store_order():
    books = LibraryStore.with_sample_data().books
    assert [b.id for b in books.filter(lambda b: b.author_id == 3)] == [7, 8]
    assert books.filter(lambda b: b.author_id == 42) == []
