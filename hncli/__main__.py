from hncli.cli import main

main()
