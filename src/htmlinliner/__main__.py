from htmlinliner.cli import main

main()
