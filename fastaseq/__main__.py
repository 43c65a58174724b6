import sys

from fastaseq.main import main

sys.exit(main())
