from weather_mcp.server import main


# stdio so MCP clients (agents) can attach
if __name__ == "__main__":
    main()
