from linopt.cli import main

raise SystemExit(main())
