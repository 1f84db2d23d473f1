import sys

from rackpick.main import main

sys.exit(main())
