"""
Table Renderer Module - 커미터 집계 테이블 렌더링

작성자 이메일별 커밋 집계를 rich Table로 구성하고,
고정 폭, 자동 줄바꿈 텍스트로 렌더링합니다.
"""
import io
from typing import List, Sequence, Tuple

from rich import box
from rich.console import Console
from rich.table import Column, Table
from rich.text import Text

from branch_committers.core.exceptions import TableLayoutError
from branch_committers.core.vcs_models import CommitterAggregate
from branch_committers.utils.logger import get_logger

logger = get_logger(__name__)

# 행 사이에도 구분선이 있는 테두리
TABLE_BOXES = {
    'unicode': box.SQUARE,
    'ascii': box.ASCII2,
}


class CommitterTableRenderer:
    """커미터 집계 테이블 렌더러"""

    HEADER = ('Committer', 'No. of commits')
    DEFAULT_COLUMN_WIDTHS = (40, 30)

    def __init__(
        self,
        column_widths: Sequence[int] = DEFAULT_COLUMN_WIDTHS,
        style: str = 'unicode',
        header: Sequence[str] = HEADER
    ):
        """
        CommitterTableRenderer 초기화

        Args:
            column_widths: 컬럼별 폭 (터미널 셀 단위, 패딩 없음)
            style: 테두리 스타일 ('unicode' 또는 'ascii')
            header: 헤더 행

        Raises:
            TableLayoutError: 컬럼 폭이 없거나 양수가 아닌 경우, 알 수 없는 스타일인 경우,
                헤더보다 컬럼이 적은 경우
        """
        widths = tuple(column_widths)
        if not widths:
            raise TableLayoutError("At least one column width is required")
        for width in widths:
            if not isinstance(width, int) or isinstance(width, bool) or width <= 0:
                raise TableLayoutError(f"Column width must be a positive integer, got {width!r}")
        if style not in TABLE_BOXES:
            raise TableLayoutError(f"Unknown table style '{style}' (expected one of {', '.join(TABLE_BOXES)})")
        if len(widths) < len(header):
            raise TableLayoutError(f"Table needs {len(header)} columns, got {len(widths)} widths")

        self.column_widths = widths
        self.style = style
        self.header = tuple(header)

    @property
    def table_width(self) -> int:
        """테두리를 포함한 전체 폭"""
        return sum(self.column_widths) + len(self.column_widths) + 1

    @staticmethod
    def build_rows(aggregate: CommitterAggregate) -> List[Tuple[str, str]]:
        """
        집계 결과를 (커미터, 커밋 수) 행 목록으로 변환

        집계 딕셔너리의 순서(처음 등장한 순서)를 그대로 유지하며,
        표시 이름은 해당 이메일의 첫 번째 커밋 작성자 이름을 사용합니다.
        """
        rows = []
        for email, records in aggregate.items():
            display_name = records[0].author_name if records else ''
            rows.append((f"{display_name} <{email}>", str(len(records))))
        return rows

    def build_table(self, rows: Sequence[Sequence[str]]) -> Table:
        """
        헤더와 데이터 행으로 rich Table 구성

        선언된 컬럼보다 셀이 적은 행은 빈 셀로 채워집니다.

        Raises:
            TableLayoutError: 셀 개수가 컬럼 개수보다 많은 행이 있는 경우
        """
        headers = list(self.header) + [''] * (len(self.column_widths) - len(self.header))
        columns = [
            Column(
                header=Text(title),
                width=width,
                min_width=width,
                max_width=width,
                overflow='fold'
            )
            for title, width in zip(headers, self.column_widths)
        ]
        table = Table(
            *columns,
            box=TABLE_BOXES[self.style],
            safe_box=False,
            show_lines=True,
            padding=0,
            collapse_padding=False,
            pad_edge=False,
            expand=False
        )

        for row in rows:
            # rich는 셀이 남으면 컬럼을 새로 만들기 때문에 먼저 확인
            if len(row) > len(self.column_widths):
                raise TableLayoutError(
                    f"Row has {len(row)} columns but only {len(self.column_widths)} widths are declared"
                )
            # 이름에 들어간 '[...]'가 마크업으로 해석되지 않도록 Text로 감쌈
            table.add_row(*(Text(str(cell)) for cell in row))

        return table

    def render_rows(self, rows: Sequence[Sequence[str]]) -> str:
        """행 목록을 테이블 문자열로 렌더링"""
        buffer = io.StringIO()
        console = Console(
            file=buffer,
            width=self.table_width,
            color_system=None,
            force_terminal=False,
            legacy_windows=False,
            emoji=False,
            highlight=False
        )
        console.print(self.build_table(rows))
        return buffer.getvalue()

    def render(self, aggregate: CommitterAggregate) -> str:
        """집계 결과를 테이블 문자열로 렌더링"""
        logger.debug(f"Rendering table for {len(aggregate)} committers")
        return self.render_rows(self.build_rows(aggregate))
