"""
Branch Committers CLI Interface

브랜치 커미터 리포트 도구의 명령줄 인터페이스
"""
import os
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from branch_committers.core.exceptions import CommittersError
from branch_committers.core.report import CommittersReport, ReportConfiguration
from branch_committers.core.history_extractor import HistoryExtractor
from branch_committers.utils.config import Config, parse_column_widths
from branch_committers.utils.git_locator import find_git_command
from branch_committers.utils.logger import get_logger, setup_logger

# 상태/오류 메시지는 stderr로 출력하여 리포트 출력과 분리
console = Console(stderr=True)

logger = get_logger(__name__)


@click.group()
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR']),
    default=None,
    help='Set the logging level (default: LOG_LEVEL or INFO)'
)
@click.option(
    '--config',
    type=click.Path(exists=True, dir_okay=False),
    help='Path to JSON configuration file'
)
@click.pass_context
def cli(ctx, log_level, config):
    """Branch Committers - 브랜치별 커미터 리포트 도구"""
    ctx.ensure_object(dict)
    ctx.obj['config'] = Config(config_file=config) if config else Config()

    app_config = ctx.obj['config'].app
    try:
        setup_logger(log_level or app_config.log_level, app_config.log_file)
    except ValueError as e:
        raise click.UsageError(str(e))


@cli.command()
@click.option('--source', '-s', 'source_branch', required=True, help='Source branch (commits to report)')
@click.option('--target', '-t', 'target_branch', required=True, help='Target branch (commits to exclude)')
@click.option('--repo', '-r', 'repository_path', type=click.Path(), default=None,
              help='Repository path (default: current directory)')
@click.option('--git', 'git_command', type=click.Path(), default=None, help='Path to the git executable')
@click.option('--widths', default=None, help='Column widths, e.g. "40,30"')
@click.option('--ascii', 'use_ascii', is_flag=True, default=False, help='Draw the table with ASCII characters')
@click.option('--timeout', type=float, default=None, help='History query timeout in seconds')
@click.pass_context
def report(ctx, source_branch, target_branch, repository_path, git_command, widths, use_ascii, timeout):
    """소스 브랜치에만 있는 커밋의 작성자별 커밋 수 출력"""
    config: Config = ctx.obj['config']

    try:
        column_widths = parse_column_widths(widths) if widths else config.table.column_widths
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint='--widths')

    try:
        configuration = ReportConfiguration.create(
            source_branch,
            target_branch,
            command_path=git_command or config.git.command,
            repository_path=repository_path or config.app.repository_path
        )
        committers_report = CommittersReport(
            configuration,
            extractor=HistoryExtractor(timeout=timeout or config.git.query_timeout),
            column_widths=column_widths,
            style='ascii' if use_ascii else config.table.style
        )
        output = committers_report.run()
    except CommittersError as e:
        logger.debug("Report generation failed", exc_info=True)
        console.print(f"[red]✗[/red] {escape(str(e))}", highlight=False)
        sys.exit(1)

    click.echo(output, nl=False)


@cli.command()
@click.pass_context
def check_config(ctx):
    """환경 설정 확인"""
    config: Config = ctx.obj['config']

    try:
        git_command = config.git.command or find_git_command()
    except CommittersError:
        git_command = None

    table = Table(title="Branch Committers 설정")
    table.add_column("항목", style="cyan")
    table.add_column("값", style="yellow")

    table.add_row("git command", git_command or "[red]not found[/red]")
    table.add_row("repository", str(config.app.repository_path or os.getcwd()))
    table.add_row("column widths", ", ".join(str(w) for w in config.table.column_widths))
    table.add_row("table style", config.table.style)
    table.add_row("query timeout", str(config.git.query_timeout or "none"))
    table.add_row("log level", config.app.log_level)

    console.print(table)

    errors = config.validate()
    if git_command is None:
        errors.append("git executable not found")

    if errors:
        for error in errors:
            console.print(f"[red]✗[/red] {error}")
        sys.exit(1)

    console.print("\n[green]✓[/green] 모든 설정이 올바릅니다.")


def main():
    """메인 엔트리포인트"""
    cli()


if __name__ == "__main__":
    main()
