from toru.cli import main

main()
