from minicomp.cli import main

main()
