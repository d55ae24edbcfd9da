from foodscreen.app.main import main

raise SystemExit(main())
