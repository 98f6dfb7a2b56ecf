from minicalc.cli import main

main()
