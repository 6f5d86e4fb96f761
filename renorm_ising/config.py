"""Fixed system sizes and output locations for the renormalization run."""

from dataclasses import dataclass
from pathlib import Path

# 6-site ring reduced block-wise to a 2-site ring
N_SITES = 6
BLOCK_SIZE = 3


@dataclass(frozen=True)
class RenormConfig:
    output_dir: str = "."
    raw_table_name: str = "cfg_out.txt"
    report_name: str = "renorm_out.txt"

    @property
    def raw_table_path(self) -> Path:
        return Path(self.output_dir) / self.raw_table_name

    @property
    def report_path(self) -> Path:
        return Path(self.output_dir) / self.report_name
