from briefli.cli import main

raise SystemExit(main())
