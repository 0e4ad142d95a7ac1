# Area curve - smoothed area chart (Tk + Matplotlib, SVG export)

import sys

from area_curve.cli import main

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
