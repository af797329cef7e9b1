"""
Configuration management for schema inspection and application settings.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

_TRUTHY = ('1', 'true', 'yes', 'on')


@dataclass
class SchemaConfig:
    """Configuration for loading and rendering schema documents."""
    schema_file: str
    dot_output: str
    filter_focus_edges: bool


@dataclass
class MCPConfig:
    """Configuration for MCP interface."""
    transport: str
    host: str
    port: int


@dataclass
class AppConfig:
    """Main application configuration."""
    environment: str
    log_level: str
    schema: SchemaConfig
    mcp: MCPConfig


def load_config() -> AppConfig:
    """Load configuration from environment variables with defaults."""
    environment = os.getenv('ENVIRONMENT', 'development')

    # Schema configuration
    schema_config = SchemaConfig(schema_file=os.getenv('SCHEMAGRAPH_SCHEMA_FILE', ''),
                                 dot_output=os.getenv('SCHEMAGRAPH_DOT_OUTPUT', 'data.dot'),
                                 filter_focus_edges=os.getenv('SCHEMAGRAPH_FILTER_FOCUS_EDGES',
                                                              'true').strip().lower() in _TRUTHY)

    # MCP configuration
    mcp_config = MCPConfig(transport=os.getenv('MCP_TRANSPORT', 'stdio'),
                           host=os.getenv('MCP_HOST', '127.0.0.1'),
                           port=int(os.getenv('MCP_PORT', '8000')))

    return AppConfig(environment=environment,
                     log_level=os.getenv('LOG_LEVEL', 'INFO'),
                     schema=schema_config,
                     mcp=mcp_config)


# Global configuration instance
config = load_config()
