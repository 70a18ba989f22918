import argparse
import json
import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from strip_codeblocks.config import config
from strip_codeblocks.logger import get_logger
from strip_codeblocks.stripper import find_codeblocks, strip_codeblocks

logger = get_logger(__name__)

STDIN_SOURCE = "-"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class FileResult:
    source: str
    blocks_stripped: int = 0
    changed: bool = False
    skipped: bool = False
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class StripReport:
    results: List[FileResult] = field(default_factory=list)

    @property
    def total_blocks(self) -> int:
        return sum(result.blocks_stripped for result in self.results)

    @property
    def failed(self) -> List[FileResult]:
        return [result for result in self.results if not result.ok]

    def to_dict(self) -> Dict:
        return {
            "results": [asdict(result) for result in self.results],
            "total_sources": len(self.results),
            "total_blocks": self.total_blocks,
            "changed": sum(1 for result in self.results if result.changed),
            "skipped": sum(1 for result in self.results if result.skipped),
            "failed": len(self.failed),
        }


def _read_source(source: str, encoding: str, max_size_kb: int) -> Tuple[Optional[str], FileResult]:
    # Bytes are decoded without newline translation so \r and \r\n survive.
    result = FileResult(source=source)
    try:
        if source == STDIN_SOURCE:
            raw = sys.stdin.buffer.read()
            size_kb = len(raw) / 1024
        else:
            path = Path(source)
            raw = None
            size_kb = path.stat().st_size / 1024

        if size_kb > max_size_kb:
            logger.warning("Skipping %s: %.1f KB exceeds limit of %s KB", source, size_kb, max_size_kb)
            result.skipped = True
            return None, result

        if raw is None:
            raw = path.read_bytes()
        return raw.decode(encoding), result
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Could not read %s: %s", source, exc)
        result.error = str(exc)
        return None, result


def _write_text(path: Path, text: str, encoding: str) -> None:
    with path.open("w", encoding=encoding, newline="") as f:
        f.write(text)



def process_sources(
    sources: Sequence[str],
    in_place: bool = False,
    encoding: Optional[str] = None,
    max_size_kb: Optional[int] = None
) -> Tuple[List[str], StripReport]:
    encoding = encoding or config.ENCODING
    max_size_kb = max_size_kb or config.MAX_FILE_SIZE_KB

    outputs: List[str] = []
    report = StripReport()

    for source in sources:
        text, result = _read_source(source, encoding, max_size_kb)
        report.results.append(result)
        if text is None:
            continue

        blocks = find_codeblocks(text)
        stripped = strip_codeblocks(text)
        result.blocks_stripped = len(blocks)
        result.changed = stripped != text
        logger.debug("%s: %s code block(s) stripped", source, len(blocks))

        if in_place and source != STDIN_SOURCE:
            if result.changed:
                try:
                    _write_text(Path(source), stripped, encoding)
                    logger.info("Rewrote %s (%s code block(s))", source, len(blocks))
                except OSError as exc:
                    logger.error("Could not write %s: %s", source, exc)
                    result.error = str(exc)
            continue

        outputs.append(stripped)

    return outputs, report


def _write_report(report: StripReport, report_path: Path) -> None:
    report_path.parent.mkdir(parents=True, exist_ok=True)
    report_path.write_text(json.dumps(report.to_dict(), indent=2))
    logger.info("Report written to %s", report_path)


def _print_counts(report: StripReport) -> None:
    for result in report.results:
        if result.ok and not result.skipped:
            sys.stdout.write(f"{result.source}: {result.blocks_stripped}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="strip-codeblocks",
        description="Remove markdown code fences while keeping the code inside them",
    )
    parser.add_argument("paths", nargs="*", help="Files to process; '-' or nothing reads stdin")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-i", "--in-place", action="store_true", help="Rewrite files that contain code blocks")
    mode.add_argument("-o", "--output", help="Write the stripped text to this file instead of stdout")
    mode.add_argument("--count", action="store_true", help="Print the number of code blocks per source")
    parser.add_argument("--report", help="Write a JSON report to this path")
    parser.add_argument("--log-level", choices=LOG_LEVELS, type=str.upper, help="Override the configured log level")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        logger.setLevel(args.log_level)

    try:
        config.validate()
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    sources = args.paths or [STDIN_SOURCE]
    if args.in_place and STDIN_SOURCE in sources:
        parser.error("--in-place requires file paths")

    outputs, report = process_sources(sources, in_place=args.in_place)

    exit_code = 0
    if args.count:
        _print_counts(report)
    elif args.output:
        output_path = config.get_project_root() / args.output
        try:
            _write_text(output_path, "".join(outputs), config.ENCODING)
        except OSError as exc:
            logger.error("Could not write %s: %s", output_path, exc)
            exit_code = 1
    elif not args.in_place:
        for text in outputs:
            sys.stdout.write(text)

    if args.report:
        _write_report(report, config.get_project_root() / args.report)

    if report.failed:
        logger.error("%s of %s source(s) failed", len(report.failed), len(report.results))
        return 1

    logger.debug("Stripped %s code block(s) from %s source(s)", report.total_blocks, len(report.results))
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
