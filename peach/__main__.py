"""
So that "py -m peach" works the same as the "peach" command.
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from peach.cmdline import main

main()
