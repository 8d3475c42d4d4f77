from pylinsolve.cli import main

raise SystemExit(main())
