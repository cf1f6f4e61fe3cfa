import zipfile
from pathlib import Path

import docx
import pytest
from reportlab.lib.pagesizes import LETTER
from reportlab.pdfgen import canvas

PAGE_ONE_LINES = [
    "Web Development Quiz",
    "1. What is HTML?",
    "* A markup language",
    "* Used for web pages",
    "2. What is a database index? A structure that speeds up SQL queries.",
]

PAGE_TWO_LINES = [
    "3. Ok? Yes.",
    "4. What is CSS? Style rules for HTML pages.",
]

QUIZ_LINES = PAGE_ONE_LINES + PAGE_TWO_LINES

WORD_MAIN_TYPE = (
    b"application/vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml"
)
SHEET_MAIN_TYPE = (
    b"application/vnd.openxmlformats-officedocument.spreadsheetml.sheet.main+xml"
)


def _create_quiz_pdf(path: Path) -> None:
    """Creates a deterministic two-page PDF of numbered questions."""
    c = canvas.Canvas(str(path), pagesize=LETTER)
    width, height = LETTER

    for page_lines in (PAGE_ONE_LINES, PAGE_TWO_LINES):
        text = c.beginText(40, height - 50)
        for line in page_lines:
            text.textLine(line)
        c.drawText(text)
        c.showPage()

    c.save()


def _create_quiz_docx(path: Path) -> None:
    """Creates a Word document with one paragraph per quiz line."""
    document = docx.Document()
    for line in QUIZ_LINES:
        document.add_paragraph(line)
    document.save(str(path))


def _create_spreadsheet_package(source: Path, path: Path) -> None:
    """Repackages a Word document so its main part claims to be a workbook."""
    with zipfile.ZipFile(source) as src, zipfile.ZipFile(path, "w") as dst:
        for item in src.infolist():
            data = src.read(item.filename)
            if item.filename == "[Content_Types].xml":
                data = data.replace(WORD_MAIN_TYPE, SHEET_MAIN_TYPE)
            dst.writestr(item, data)


@pytest.fixture(scope="module")
def document_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Create all test documents once per module."""
    dir_path: Path = tmp_path_factory.mktemp("documents")

    _create_quiz_pdf(dir_path / "quiz.pdf")
    _create_quiz_docx(dir_path / "quiz.docx")
    _create_spreadsheet_package(dir_path / "quiz.docx", dir_path / "not_word.docx")
    (dir_path / "corrupt.pdf").write_bytes(b"this is not a pdf")
    (dir_path / "corrupt.docx").write_bytes(b"this is not a docx")

    return dir_path


@pytest.fixture(scope="module")
def quiz_pages() -> tuple[list[str], list[str]]:
    return PAGE_ONE_LINES, PAGE_TWO_LINES


@pytest.fixture(scope="module")
def quiz_lines() -> list[str]:
    return QUIZ_LINES
