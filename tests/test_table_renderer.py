"""
Table Renderer Unit Tests

CommitterTableRenderer 단위 테스트
"""
from pathlib import Path

import pytest

# 프로젝트 루트를 Python 경로에 추가
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rich.table import Table

from branch_committers.core.exceptions import TableLayoutError
from branch_committers.core.table_renderer import CommitterTableRenderer
from branch_committers.core.vcs_models import CommitRecord


def record(name, email, commit_hash="c0"):
    return CommitRecord(commit_hash=commit_hash, author_name=name, author_email=email, commit_timestamp=0)


def aggregate_of(*records):
    committers = {}
    for r in records:
        committers.setdefault(r.author_email, []).append(r)
    return committers


class TestTableLayout:
    """고정 폭 테이블 레이아웃 테스트 클래스"""

    def test_single_row(self):
        """헤더와 한 행 렌더링 및 패딩 테스트"""
        renderer = CommitterTableRenderer((5, 3), header=("name", "n"))

        assert renderer.render_rows([("ab", "1")]) == (
            "┌─────┬───┐\n"
            "│name │n  │\n"
            "├─────┼───┤\n"
            "│ab   │1  │\n"
            "└─────┴───┘\n"
        )

    def test_rows_are_separated(self):
        """행 사이 구분선 테스트"""
        renderer = CommitterTableRenderer((4, 2), header=("x", "y"))

        assert renderer.render_rows([("a", "1"), ("b", "2")]) == (
            "┌────┬──┐\n"
            "│x   │y │\n"
            "├────┼──┤\n"
            "│a   │1 │\n"
            "├────┼──┤\n"
            "│b   │2 │\n"
            "└────┴──┘\n"
        )

    def test_wraps_within_column(self):
        """컬럼 폭을 넘는 내용의 줄바꿈 테스트"""
        renderer = CommitterTableRenderer((5, 3), header=("name", "n"))
        lines = renderer.render_rows([("hello world", "7")]).splitlines()

        assert lines[3:5] == ["│hello│7  │", "│world│   │"]

    def test_breaks_long_words(self):
        """컬럼보다 긴 단어 강제 분리 테스트"""
        renderer = CommitterTableRenderer((4,), header=("h",))
        lines = renderer.render_rows([("abcdefghij",)]).splitlines()

        assert lines[3:6] == ["│abcd│", "│efgh│", "│ij  │"]

    def test_wide_characters(self):
        """전각 문자의 셀 폭 계산 테스트"""
        lines = CommitterTableRenderer((8,), header=("h",)).render_rows([("김철수",)]).splitlines()
        assert lines[3] == "│김철수  │"

        folded = CommitterTableRenderer((5,), header=("h",)).render_rows([("가나다라",)]).splitlines()
        assert folded[3:5] == ["│가나 │", "│다라 │"]

    def test_ascii_style(self):
        """ASCII 테두리 스타일 테스트"""
        renderer = CommitterTableRenderer((3,), style="ascii", header=("h",))

        assert renderer.render_rows([("x",)]) == (
            "+---+\n"
            "|h  |\n"
            "+---+\n"
            "|x  |\n"
            "+---+\n"
        )

    def test_fewer_cells_are_padded(self):
        """셀이 부족한 행은 빈 셀로 채우는지 테스트"""
        renderer = CommitterTableRenderer((2, 2), header=("h",))
        lines = renderer.render_rows([("a",)]).splitlines()

        assert lines[1] == "│h │  │"
        assert lines[3] == "│a │  │"

    def test_markup_is_not_interpreted(self):
        """셀 내용의 대괄호가 rich 마크업으로 해석되지 않는지 테스트"""
        renderer = CommitterTableRenderer((20, 3))
        output = renderer.render_rows([("[bold]Eve[/bold]", "1")])

        assert "[bold]Eve[/bold]" in output

    def test_build_table_uses_fixed_columns(self):
        """rich Table 컬럼이 선언된 폭으로 고정되는지 테스트"""
        table = CommitterTableRenderer((12, 6)).build_table([("a", "1")])

        assert isinstance(table, Table)
        assert [column.width for column in table.columns] == [12, 6]
        assert table.row_count == 1

    def test_rendering_is_idempotent(self):
        """반복 렌더링 결과 동일성 테스트"""
        renderer = CommitterTableRenderer((6, 6), header=("a", "b"))
        assert renderer.render_rows([("one two three", "4")]) == renderer.render_rows([("one two three", "4")])

    @pytest.mark.parametrize("widths", [(), (0, 30), (40, -1), (40, "30"), (40, True)])
    def test_invalid_widths(self, widths):
        """잘못된 컬럼 폭은 TableLayoutError 발생 테스트"""
        with pytest.raises(TableLayoutError):
            CommitterTableRenderer(widths, header=())

    def test_too_many_cells(self):
        """선언된 컬럼보다 셀이 많으면 TableLayoutError 발생 테스트"""
        renderer = CommitterTableRenderer((10,), header=("h",))

        with pytest.raises(TableLayoutError, match="only 1 widths"):
            renderer.render_rows([("a", "b")])

    def test_unknown_style(self):
        """알 수 없는 스타일은 TableLayoutError 발생 테스트"""
        with pytest.raises(TableLayoutError, match="Unknown table style"):
            CommitterTableRenderer((10, 10), style="fancy")


class TestCommitterTableRenderer:
    """CommitterTableRenderer 테스트 클래스"""

    def test_header_only_for_empty_aggregate(self):
        """커밋이 없으면 헤더만 출력되는지 테스트"""
        output = CommitterTableRenderer().render({})
        lines = output.splitlines()

        assert len(lines) == 3
        assert lines[1] == "│" + "Committer".ljust(40) + "│" + "No. of commits".ljust(30) + "│"

    def test_row_per_email_with_counts(self):
        """이메일별 행 개수와 커밋 수 테스트"""
        committers = aggregate_of(
            record("Alice", "alice@example.com", "c1"),
            record("Bob", "bob@example.com", "c2"),
            record("Alice", "alice@example.com", "c3"),
        )

        rows = CommitterTableRenderer.build_rows(committers)

        assert rows == [("Alice <alice@example.com>", "2"), ("Bob <bob@example.com>", "1")]

    def test_first_name_wins(self):
        """첫 번째 작성자 이름이 표시되는지 테스트"""
        committers = aggregate_of(
            record("Carol", "carol@example.com", "c1"),
            record("Carol W.", "carol@example.com", "c2"),
        )

        assert CommitterTableRenderer.build_rows(committers) == [("Carol <carol@example.com>", "2")]

    def test_order_is_not_sorted(self):
        """행 순서가 정렬되지 않고 등장 순서를 따르는지 테스트"""
        committers = aggregate_of(
            record("Zed", "zed@example.com"),
            record("Amy", "amy@example.com"),
            record("Amy", "amy@example.com"),
            record("Amy", "amy@example.com"),
            record("Mo", "mo@example.com"),
        )

        output = CommitterTableRenderer().render(committers)

        assert output.index("Zed") < output.index("Amy") < output.index("Mo")

    def test_render_layout(self):
        """기본 컬럼 폭 렌더링 테스트"""
        committers = aggregate_of(record("Bob", "bob@example.com"))

        output = CommitterTableRenderer().render(committers)
        lines = output.splitlines()

        assert output.endswith("\n")
        assert all(len(line) == 73 for line in lines)
        assert lines[3] == "│" + "Bob <bob@example.com>".ljust(40) + "│" + "1".ljust(30) + "│"

    def test_long_committer_wraps(self):
        """긴 커미터 표시명이 여러 줄로 감싸지는지 테스트"""
        committers = aggregate_of(
            record("Bartholomew Montgomery-Featherstonehaugh", "bartholomew.featherstonehaugh@example.com")
        )

        lines = CommitterTableRenderer().render(committers).splitlines()
        body = lines[3:-1]

        assert len(body) > 1
        assert body[0].endswith("│1" + " " * 29 + "│")
        assert all(line.endswith("│" + " " * 30 + "│") for line in body[1:])

    def test_custom_widths_and_style(self):
        """컬럼 폭/스타일 설정 테스트"""
        renderer = CommitterTableRenderer(column_widths=(30, 5), style="ascii")
        lines = renderer.render(aggregate_of(record("Bob", "bob@example.com"))).splitlines()

        assert lines[0] == "+" + "-" * 30 + "+" + "-" * 5 + "+"

    def test_render_is_pure(self):
        """같은 입력에 대해 같은 출력 테스트"""
        committers = aggregate_of(record("Bob", "bob@example.com"))
        renderer = CommitterTableRenderer()

        assert renderer.render(committers) == renderer.render(committers)

    def test_requires_two_columns(self):
        """컬럼 폭이 하나뿐이면 TableLayoutError 발생 테스트"""
        with pytest.raises(TableLayoutError):
            CommitterTableRenderer(column_widths=(40,))

    def test_invalid_width(self):
        """양수가 아닌 폭은 TableLayoutError 발생 테스트"""
        with pytest.raises(TableLayoutError):
            CommitterTableRenderer(column_widths=(40, 0))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
