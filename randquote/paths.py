"""
Path utilities for rand-quote.

Single source of truth for the config file location and for the
ordered list of places a quote file is looked up in.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

# Configuration file, kept at the top of the data directory
CFG_FILE = "rand_quote.yaml"


def cfg_path(data_dir: Path) -> Path:
    """Path to the config file <data_dir>/rand_quote.yaml."""
    return Path(data_dir) / CFG_FILE


def candidate_paths(
    filename: str,
    category_path: Sequence[str],
    *,
    data_dir: Path | str,
    html_dir: Path | str = "",
) -> List[Path]:
    """
    Candidate locations for a quote file, most specific first:

      1) <data_dir>/<category...>/<filename>   local data directory
      2) <data_dir>/<filename>                 top of the data directory
      3) <html_dir>/<category...>/<filename>   local HTML directory
                                               (cwd-relative if html_dir is empty)
      4) <filename>                            as given

    Duplicates are kept: an entry at the top of the tree yields the same
    path for 1 and 2, and trying it twice is harmless.
    """
    cats = [c for c in category_path if c]
    data = Path(data_dir)
    html = Path(html_dir) if html_dir else Path()
    return [
        data.joinpath(*cats, filename),
        data / filename,
        html.joinpath(*cats, filename),
        Path(filename),
    ]


__all__ = ["CFG_FILE", "cfg_path", "candidate_paths"]
