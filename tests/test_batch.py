import pytest

from pdfshelf.errors import ExtractionError
from pdfshelf.models import DocumentMetadata
from pdfshelf.rename.batch import ConcurrentRenamer, discover_files
from pdfshelf.utils.constants import SKIP_CANCELLED, SKIP_TARGET_EXISTS, STATUS_SKIP
from tests.conftest import FakeExtractor


@pytest.fixture
def library(tmp_path, make_pdf):
    make_pdf("McGraw-Hill.Programming_Basics_-_John_R_Smith_(2019).pdf", tmp_path / "cs" / "intro")
    make_pdf("random_document.pdf", tmp_path)
    make_pdf("Deep_Work_by_C_Newport_2016.PDF", tmp_path / "self-help")
    (tmp_path / "notes.txt").write_text("not a pdf")
    (tmp_path / "folder.pdf").mkdir()
    return tmp_path


@pytest.mark.parametrize("use_executor", [False, True])
def test_discover_files(library, use_executor):
    from concurrent.futures import ThreadPoolExecutor

    if use_executor:
        with ThreadPoolExecutor(max_workers=2) as executor:
            found = discover_files(library, executor=executor)
    else:
        found = discover_files(library)

    assert sorted(p.name for p in found) == [
        "Deep_Work_by_C_Newport_2016.PDF",
        "McGraw-Hill.Programming_Basics_-_John_R_Smith_(2019).pdf",
        "random_document.pdf",
    ]


def test_run_renames_tree(library, reporter):
    renamer = ConcurrentRenamer(extractor=FakeExtractor(), reporter=reporter, workers=4)
    summary = renamer.run(library)

    assert summary.total == 3
    assert summary.renamed == 2
    assert summary.skipped == 1
    assert summary.failed == 0
    assert (library / "cs" / "intro" / "Programming Basics - John R. Smith [2019].pdf").exists()
    assert (library / "self-help" / "Deep Work - C. Newport [2016].PDF").exists()
    assert (library / "random_document.pdf").exists()

    assert sorted(e.completed for e in reporter.events) == [1, 2, 3]
    assert {e.total for e in reporter.events} == {3}


def test_second_run_is_a_no_op(library):
    ConcurrentRenamer(workers=2).run(library)
    before = sorted(p.name for p in library.rglob("*"))

    summary = ConcurrentRenamer(workers=2).run(library)

    assert summary.renamed == 0
    assert sorted(p.name for p in library.rglob("*")) == before


def test_collision_renames_at_most_one(tmp_path_factory):
    for attempt in range(10):
        folder = tmp_path_factory.mktemp(f"collide{attempt}")
        (folder / "Deep_Work_-_C_Newport_(2016).pdf").write_bytes(b"a")
        (folder / "Deep Work - C Newport (2016).pdf").write_bytes(b"b")

        summary = ConcurrentRenamer(workers=2).run(folder)

        assert summary.renamed == 1
        assert summary.skipped == 1
        skipped = next(o for o in summary.outcomes if o.status == STATUS_SKIP)
        assert skipped.reason == SKIP_TARGET_EXISTS
        assert skipped.source.exists()
        assert len(list(folder.iterdir())) == 2


def test_one_failing_file_does_not_affect_others(tmp_path, make_pdf):
    make_pdf("bad_scan.pdf")
    make_pdf("unreadable_scan.pdf")
    good = make_pdf("Deep_Work_-_C_Newport_(2016).pdf")
    extractor = FakeExtractor(
        {
            "bad_scan.pdf": RuntimeError("parser exploded"),
            "unreadable_scan.pdf": ExtractionError("unreadable_scan.pdf", "EOF marker not found"),
        }
    )

    summary = ConcurrentRenamer(extractor=extractor, workers=3).run(tmp_path)

    assert summary.failed == 1
    assert summary.renamed == 1
    assert summary.skipped == 1
    assert not good.exists()
    assert (tmp_path / "bad_scan.pdf").exists()


def test_reporter_errors_do_not_abort(library):
    def broken_reporter(event):
        raise RuntimeError("terminal went away")

    summary = ConcurrentRenamer(reporter=broken_reporter, workers=2).run(library)
    assert summary.total == 3
    assert summary.renamed == 2


def test_cancelled_renamer_starts_nothing(library, reporter):
    renamer = ConcurrentRenamer(reporter=reporter, workers=2)
    renamer.cancel()
    summary = renamer.run(library)

    assert renamer.cancelled
    assert summary.renamed == 0
    assert {o.reason for o in summary.outcomes} == {SKIP_CANCELLED}
    assert len(reporter.events) == 3
    assert (library / "random_document.pdf").exists()


def test_dry_run_touches_nothing(library):
    before = sorted(p.name for p in library.rglob("*"))
    summary = ConcurrentRenamer(workers=2, dry_run=True).run(library)

    assert summary.planned == 2
    assert sorted(p.name for p in library.rglob("*")) == before


def test_process_files_with_explicit_list(make_pdf):
    file = make_pdf("Clean_Code_(R_C_Martin)_2008.pdf")
    extractor = FakeExtractor({file.name: DocumentMetadata(author="Someone Else")})

    summary = ConcurrentRenamer(extractor=extractor, workers=1).process_files([file])

    assert summary.renamed == 1
    assert summary.outcomes[0].target.name == "Clean Code - R. C. Martin [2008].pdf"
    assert extractor.calls == []


def test_workers_must_be_positive():
    with pytest.raises(ValueError):
        ConcurrentRenamer(workers=0)
