from owo.cli import main

main()
