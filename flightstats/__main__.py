import sys

from flightstats.cli import main

sys.exit(main())
