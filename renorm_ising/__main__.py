"""Run the 6 -> 2 spin block renormalization and write both reports."""

from renorm_ising.aggregate import count_by_energy
from renorm_ising.config import RenormConfig
from renorm_ising.records import enumerate_records
from renorm_ising.report import aggregate_report_lines, write_reports


def main():
    config = RenormConfig()
    records = enumerate_records()
    equal, unequal = count_by_energy(records)

    raw_path, report_path = write_reports(records, equal, unequal, config)
    print(f"Wrote {len(records)} configurations to {raw_path}")
    print(f"Wrote weight sums to {report_path}")
    for line in aggregate_report_lines(equal, unequal):
        print(f"  {line}")


if __name__ == "__main__":
    main()
