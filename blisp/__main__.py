import sys

from blisp.repl import main

sys.exit(main())
