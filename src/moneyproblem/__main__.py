import sys

from moneyproblem.app import main

sys.exit(main())
