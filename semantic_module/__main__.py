from semantic_module.cli import main

main()
