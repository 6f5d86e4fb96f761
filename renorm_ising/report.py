"""Text reports: the raw per-configuration table and the aggregated sums."""

from typing import Dict, List, Sequence

from renorm_ising.config import RenormConfig
from renorm_ising.records import Record

RAW_HEADER = "s1 s2 s3\t s1'\ts4 s5 s6\ts2'\t\tH\t  H'"


def _cols(values) -> str:
    return "".join(f"{v:>3}" for v in values)


def format_record(rec: Record) -> str:
    """One raw-table row: s1 s2 s3, s1', s4 s5 s6, s2', H, H'."""
    return (f"{_cols(rec.spins[:3])}\t{rec.reduced[0]:>3}\t"
            f"{_cols(rec.spins[3:])}\t{rec.reduced[1]:>3}\t\t"
            f"{rec.H1:>3}\t{rec.H2:>3}")


def raw_table_lines(records: Sequence[Record]) -> List[str]:
    return [RAW_HEADER] + [format_record(rec) for rec in records]


def format_weight_sum(lhs: str, counts: Dict[int, int]) -> str:
    """Render e.g. "Exp[A(k)+2k'] = 14 Exp[-2 k]+ 16 Exp[2 k]", keys ascending."""
    terms = [f"{counts[H]} Exp[{H} k]" for H in sorted(counts)]
    return f"{lhs} = " + "+ ".join(terms)


def aggregate_report_lines(equal: Dict[int, int], unequal: Dict[int, int]) -> List[str]:
    return [
        format_weight_sum("Exp[A(k)+2k']", equal),
        format_weight_sum("Exp[A(k)-2k']", unequal),
    ]


def _write_lines(path, lines):
    path.write_text("".join(line + "\n" for line in lines), encoding="ascii")


def write_reports(records, equal, unequal, config: RenormConfig = RenormConfig()):
    """Write the raw table, then the aggregate report.

    Each file is rendered fully before it is opened. OSError from either
    write propagates to the caller.

    Returns:
        (raw_table_path, report_path)
    """
    _write_lines(config.raw_table_path, raw_table_lines(records))
    _write_lines(config.report_path, aggregate_report_lines(equal, unequal))
    return config.raw_table_path, config.report_path
