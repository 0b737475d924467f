import sys

from callisp.cmdline import main

sys.exit(main())
