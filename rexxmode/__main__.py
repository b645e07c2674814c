import sys

from rexxmode.main import main

sys.exit(main())
