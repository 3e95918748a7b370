#!/usr/bin/env python3
"""
Write a data file the way the flawed logging device does: one reading per
line, every character reversed. Handy for trying the tool by hand.

    python scripts/make_test_data.py data.txt 1.0 20.0 15.0 5.0
"""
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from utilisation.processing.token_decoder import reverse_token

if __name__ == "__main__":
    if len(sys.argv) < 3:
        print(f"usage: {sys.argv[0]} OUTPUT_FILE READING [READING ...]", file=sys.stderr)
        sys.exit(2)

    output_file = Path(sys.argv[1])
    readings = sys.argv[2:]

    with open(output_file, "w") as f:
        for reading in readings:
            f.write(reverse_token(reading) + "\n")

    print(f"✓ {len(readings)} reversed readings written to {output_file}")
