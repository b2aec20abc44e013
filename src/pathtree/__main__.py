import sys

from pathtree.main import main

sys.exit(main())
