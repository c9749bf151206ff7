from deployment_info.main import main

raise SystemExit(main())
