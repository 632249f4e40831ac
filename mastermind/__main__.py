from .mastermind_cli import main

raise SystemExit(main())
