from archive_mcp.cli import main

main()
