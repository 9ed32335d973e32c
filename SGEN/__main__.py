from SGEN.cli import main

main()
