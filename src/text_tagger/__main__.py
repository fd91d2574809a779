from text_tagger.cli import main

raise SystemExit(main())
