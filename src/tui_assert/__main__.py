from tui_assert.cli import main

main()
