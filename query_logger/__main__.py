import sys

from query_logger.app import main

sys.exit(main())
