import asyncio
import os
import sys
from typing import Optional

from dotenv import load_dotenv
from mcp import ClientSession, StdioServerParameters, types
from mcp.client.stdio import stdio_client

load_dotenv()

# If you want to override how we start the MCP server, you can change these:
MCP_COMMAND = os.getenv("WEATHER_MCP_COMMAND", sys.executable)
MCP_ARGS = os.getenv("WEATHER_MCP_ARGS", "weather_mcp_server.py").split()


def result_text(result: types.CallToolResult) -> str:
    """
    Join the text parts of a tool result; error results are prefixed so they
    stand out in the terminal.
    """
    text = "\n".join(
        part.text for part in result.content if isinstance(part, types.TextContent)
    )
    if result.isError:
        return f"ERROR: {text}"
    return text


async def ask_server(city: str, hours: Optional[int] = None) -> None:
    """
    Launch the weather MCP server over stdio, call both tools for *city* and
    print what comes back.
    """
    server_params = StdioServerParameters(
        command=MCP_COMMAND,
        args=MCP_ARGS,
        # the stdio client only forwards a minimal environment by default
        env=dict(os.environ),
    )

    async with stdio_client(server_params) as (read, write):
        async with ClientSession(read, write) as session:
            await session.initialize()

            tools_response = await session.list_tools()
            print("MCP tools:", [t.name for t in tools_response.tools])

            weather = await session.call_tool("get_weather", arguments={"city": city})
            print("=== get_weather ===")
            print(result_text(weather))

            arguments = {"city": city}
            if hours is not None:
                arguments["hours"] = hours
            forecast = await session.call_tool("get_forecast", arguments=arguments)
            print("=== get_forecast ===")
            print(result_text(forecast))


async def main() -> None:
    city = sys.argv[1] if len(sys.argv) > 1 else "Austin, TX"
    hours = int(sys.argv[2]) if len(sys.argv) > 2 else None
    await ask_server(city, hours)


if __name__ == "__main__":
    asyncio.run(main())
