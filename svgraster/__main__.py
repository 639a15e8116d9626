import sys

from svgraster.main import main

sys.exit(main())
