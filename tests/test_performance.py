"""Performance tests for import-groups scan latency and throughput."""

from __future__ import annotations

import time
from pathlib import Path

from import_groups.engine import scan_source
from import_groups.lib.models import Configuration


FIXTURES_DIR = Path(__file__).parent / "fixtures"
PASSING_DIR = FIXTURES_DIR / "passing"

MAX_SCAN_MS = 2000


def _large_source(count: int) -> str:
    prefixes = ("", "@app/", "../", "./")
    lines = [
        f"import {{ m{i} }} from '{prefixes[i % 4]}pkg{(i * 7919) % count}'"
        for i in range(count)
    ]
    body = "\n".join(f"export const v{i} = `${{m{i}}}` / 2" for i in range(count))
    return "\n".join(lines) + "\n\n" + body + "\n"


class TestScanPerformance:
    """Timing guard tests for scan_source."""

    def test_single_file_under_threshold(self, alias_config: Configuration) -> None:
        """A clean file scans in under MAX_SCAN_MS."""
        source = (PASSING_DIR / "canonical.tsx").read_text(encoding="utf-8")

        start = time.perf_counter()
        result = scan_source(source, "perf_test.tsx", alias_config)
        elapsed_ms = (time.perf_counter() - start) * 1000

        assert elapsed_ms < MAX_SCAN_MS, (
            f"scan_source took {elapsed_ms:.1f}ms (limit: {MAX_SCAN_MS}ms)"
        )
        assert result.scan_ms >= 0

    def test_large_file_under_threshold(self, alias_config: Configuration) -> None:
        """A file with 1000 shuffled imports scans and plans in time."""
        source = _large_source(1000)

        start = time.perf_counter()
        result = scan_source(source, "large.ts", alias_config)
        elapsed_ms = (time.perf_counter() - start) * 1000

        assert result.fix is not None
        assert elapsed_ms < MAX_SCAN_MS, (
            f"scan_source took {elapsed_ms:.1f}ms (limit: {MAX_SCAN_MS}ms)"
        )

    def test_repeated_scans_stable(self, alias_config: Configuration) -> None:
        """Running scan_source 10 times does not degrade performance."""
        source = _large_source(200)
        timings: list[float] = []
        for _ in range(10):
            start = time.perf_counter()
            scan_source(source, "repeat.ts", alias_config)
            timings.append((time.perf_counter() - start) * 1000)
        assert max(timings) < MAX_SCAN_MS
