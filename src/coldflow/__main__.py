import sys

from coldflow.cli import main

sys.exit(main())
