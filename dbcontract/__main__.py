import sys

from dbcontract.main import main

sys.exit(main())
