from critpath.cli import main

main()
