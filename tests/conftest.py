import pytest

from gpasim.data import TranscriptParser
from gpasim.models import Course, Semester, ParsedData


def header_row(text, colspan=13):
    return f'<tr><td colspan="{colspan}">{text}</td></tr>'


def course_row(index, name, credits, attempt, scores=("8.0", "-", "7.5", "8.0", "7.8"), grade="B"):
    component, reserved, midterm, final, numeric = scores
    cells = [index, name, credits, attempt, component, reserved, midterm, final, numeric, grade, "", "", ""]
    return "<tr>" + "".join(f"<td>{c}</td>" for c in cells) + "</tr>"


def page(*rows, marker="daotao.vku.udn.vn"):
    return (
        "<html><head><title>Kết quả học tập</title></head><body>"
        f"<div class='footer'>{marker}</div>"
        "<table>" + "".join(rows) + "</table></body></html>"
    )


SAMPLE_PAGE = page(
    header_row("Học kỳ 1 - Năm học 2022-2023"),
    course_row("1", "Giải tích 1", "3", "1", grade="A"),
    course_row("2", "Vật lý   đại cương", "2", "1", grade="C"),
    course_row("Tổng", "", "5", "", grade=""),
    header_row("Học kỳ riêng - Quy đổi"),
    course_row("1", "Tiếng Anh (miễn)", "3", "1", grade="R"),
    header_row("Học kỳ 2 - Năm học 2022-2023"),
    course_row("1", "Lập trình Python", "3", "1", grade="D"),
    course_row("2", "Cấu trúc dữ liệu", "4", "2", grade="B"),
    course_row("3", "Đồ án cơ sở", "2", "1", scores=("", "", "", "", ""), grade=""),
)


@pytest.fixture
def sample_page():
    return SAMPLE_PAGE


@pytest.fixture
def parsed(sample_page):
    return TranscriptParser().parse(sample_page)


def make_course(cid, credits, grade, included=None, has_grade=None):
    has = grade != "" if has_grade is None else has_grade
    return Course(
        id=cid,
        sequence_number=1,
        name=cid,
        credits=credits,
        letter_grade=grade,
        has_grade=has,
        included=has if included is None else included,
    )


@pytest.fixture
def two_course_data():
    """3 credits of A and 2 credits of C in one semester."""
    return ParsedData(semesters=(
        Semester(id="semester-1", name="Học kỳ 1", courses=(
            make_course("semester-1-course-0", 3, "A"),
            make_course("semester-1-course-1", 2, "C"),
        )),
    ))
