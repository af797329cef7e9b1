"""
MCP Interface Layer using fastmcp for agent-driven schema inspection.
"""
from typing import Optional

from fastmcp import FastMCP

from schemagraph.services.identity_index import ModelNotFoundError
from schemagraph.services.schema_inspection import SchemaInspectionService
from schemagraph.utils.config import config
from schemagraph.utils.logging_config import get_logger
from schemagraph.utils.schema_loader import SchemaLoadError

logger = get_logger(__name__)

# Initialize FastMCP application
mcp = FastMCP('Schema Graph')
_service: Optional[SchemaInspectionService] = None


def get_service() -> SchemaInspectionService:
    """Load the configured schema file on first use."""
    global _service
    if _service is None:
        if not config.schema.schema_file:
            raise ValueError('SCHEMAGRAPH_SCHEMA_FILE is not set')
        _service = SchemaInspectionService.from_file(config.schema.schema_file)
    return _service


@mcp.tool()
def enumerate_schema(show_uuid: bool = False, model: Optional[str] = None) -> str:
    """List models and their fields.

    Args:
        show_uuid: Prefix each name with its UUID
        model: Optional model name or UUID to focus on

    Returns:
        One line per model ([M]) and per field ([F])

    Raises:
        Exception: If the listing fails
    """
    try:
        return get_service().enumerate(show_uuid=show_uuid, model=model)

    except (ModelNotFoundError, SchemaLoadError) as e:
        logger.error(f'Schema error in MCP enumerate: {e}')
        raise Exception(f'Schema enumerate failed: {e}')
    except Exception as e:
        logger.error(f'Unexpected error in MCP enumerate: {e}')
        raise Exception(f'Schema enumerate failed: {e}')


@mcp.tool()
def render_er_graph(model: Optional[str] = None) -> str:
    """Render the entity-relationship graph in Graphviz DOT format.

    Args:
        model: Optional model name or UUID to focus on

    Returns:
        DOT document text

    Raises:
        Exception: If rendering fails
    """
    try:
        return get_service().render_dot(model=model)

    except (ModelNotFoundError, SchemaLoadError) as e:
        logger.error(f'Schema error in MCP render: {e}')
        raise Exception(f'Schema render failed: {e}')
    except Exception as e:
        logger.error(f'Unexpected error in MCP render: {e}')
        raise Exception(f'Schema render failed: {e}')


@mcp.tool()
def get_model(model: str, show_meta: bool = False) -> str:
    """Show one model's name, label, table and field count.

    Args:
        model: Model name or UUID
        show_meta: Include UUID and source location

    Returns:
        Key/value report, one attribute per line

    Raises:
        Exception: If the model cannot be found
    """
    try:
        if not model or not model.strip():
            raise ValueError('Model name or UUID is required')

        return get_service().describe(model, show_meta=show_meta)

    except (ModelNotFoundError, SchemaLoadError) as e:
        logger.error(f'Schema error in MCP get_model: {e}')
        raise Exception(f'Schema get_model failed: {e}')
    except Exception as e:
        logger.error(f'Unexpected error in MCP get_model: {e}')
        raise Exception(f'Schema get_model failed: {e}')


if __name__ == '__main__':
    transport = config.mcp.transport
    if transport == 'stdio':
        mcp.run(transport=transport)
    else:
        mcp.run(transport=transport, host=config.mcp.host, port=config.mcp.port)
