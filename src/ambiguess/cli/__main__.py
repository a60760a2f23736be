from ambiguess.cli import main

main()
