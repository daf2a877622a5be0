"""Graph rendering using Graphviz."""

import logging
import os
import shutil
import sys
from contextlib import contextmanager, nullcontext
from pathlib import Path
from typing import Optional, Union

import graphviz

from ..core.errors import RenderError
from ..core.models import Engine, Graph, OutputFormat, RenderConfig

logger = logging.getLogger(__name__)


@contextmanager
def suppress_stderr():
    """Context manager to temporarily suppress stderr output."""
    with open(os.devnull, 'w') as devnull:
        old_stderr = sys.stderr
        sys.stderr = devnull
        try:
            yield
        finally:
            sys.stderr = old_stderr


class GraphRenderer:
    """Renders DOT language to image formats using Graphviz."""

    def __init__(self, config: Optional[RenderConfig] = None):
        """Initialize renderer and check Graphviz availability.

        Args:
            config: Default engine, output format and verbosity.

        Raises:
            RenderError: If the Graphviz ``dot`` executable is not on PATH.
        """
        self.config = config or RenderConfig()
        self._check_graphviz_installation()

    @property
    def verbose(self) -> bool:
        return self.config.verbose

    def _check_graphviz_installation(self) -> None:
        """Check if Graphviz is installed and accessible."""
        if not shutil.which('dot'):
            raise RenderError(
                "Graphviz 'dot' executable not found. Please install Graphviz:\n"
                "  Ubuntu/Debian: sudo apt-get install graphviz\n"
                "  macOS: brew install graphviz\n"
                "  Windows: Download from https://graphviz.org/download/"
            )

        logger.debug("Graphviz installation verified")

    def _resolve(
        self,
        engine: Optional[Union[Engine, str]],
        output_format: Optional[Union[OutputFormat, str]],
    ) -> tuple[Engine, OutputFormat]:
        engine = Engine(engine) if engine is not None else self.config.engine
        if output_format is not None:
            output_format = OutputFormat(output_format)
        else:
            output_format = self.config.output_format
        return engine, output_format

    def render_to_bytes(
        self,
        dot_content: str,
        engine: Optional[Union[Engine, str]] = None,
        output_format: Optional[Union[OutputFormat, str]] = None,
    ) -> bytes:
        """Render DOT content to bytes for in-memory usage.

        Args:
            dot_content: DOT language content.
            engine: Graphviz engine to use. Defaults to the configured engine.
            output_format: Output format. Defaults to the configured format.

        Returns:
            Rendered graph as bytes.

        Raises:
            RenderError: If Graphviz fails; the DOT source is kept on the error.
        """
        engine, output_format = self._resolve(engine, output_format)
        logger.info(f"Rendering graph with {engine.value} to {output_format.value}")

        try:
            source = graphviz.Source(dot_content, engine=engine.value)

            # Use context manager to suppress stderr if not in verbose mode
            context_manager = suppress_stderr() if not self.verbose else nullcontext()

            with context_manager:
                return source.pipe(format=output_format.value)

        except graphviz.ExecutableNotFound as e:
            raise RenderError(f"Graphviz executable not found: {e}", dot_content) from e
        except graphviz.CalledProcessError as e:
            raise RenderError(f"Graphviz exited with status {e.returncode}: {e}", dot_content) from e

    def render_to_file(
        self,
        dot_content: str,
        output_file: Union[str, Path],
        engine: Optional[Union[Engine, str]] = None,
        output_format: Optional[Union[OutputFormat, str]] = None,
    ) -> Path:
        """Render DOT content to a file, creating missing directories.

        Args:
            dot_content: DOT language content.
            output_file: Output file path.
            engine: Graphviz engine to use.
            output_format: Output format.

        Returns:
            Path to the generated file.
        """
        output_path = Path(output_file)
        data = self.render_to_bytes(dot_content, engine, output_format)

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(data)
        except OSError as e:
            raise RenderError(f"Failed to write {output_path}: {e}", dot_content) from e

        logger.info(f"Graph rendered successfully to: {output_path}")
        return output_path

    def validate_dot(self, dot_content: str) -> bool:
        """Validate DOT content syntax.

        Args:
            dot_content: DOT language content to validate.

        Returns:
            True if Graphviz accepts the content, False otherwise.
        """
        try:
            self.render_to_bytes(dot_content, output_format=OutputFormat.SVG)
            return True
        except RenderError as e:
            logger.error(f"DOT validation failed: {e}")
            return False

    def get_available_engines(self) -> list[str]:
        """Get list of available Graphviz layout engines.

        Returns:
            List of available engine names.
        """
        return [engine.value for engine in Engine if shutil.which(engine.value)]

    def save_dot_file(self, dot_content: str, output_file: Union[str, Path]) -> Path:
        """Save DOT content to a .dot file.

        Args:
            dot_content: DOT language content.
            output_file: Output file path.

        Returns:
            Path to the saved DOT file.
        """
        dot_path = Path(output_file)

        # Ensure .dot extension
        if dot_path.suffix.lower() != '.dot':
            dot_path = dot_path.with_suffix('.dot')

        dot_path.parent.mkdir(parents=True, exist_ok=True)
        dot_path.write_text(dot_content, encoding='utf-8')
        logger.info(f"DOT file saved to: {dot_path}")

        return dot_path


def save(
    graph: Graph,
    filename: Union[str, Path],
    engine: Union[Engine, str] = Engine.DOT,
    output_format: Union[OutputFormat, str] = OutputFormat.SVG,
) -> Path:
    """Render ``graph`` with Graphviz and write it to ``filename``.

    The containing directory is created if it does not exist.
    """
    return GraphRenderer().render_to_file(graph.source, filename, engine, output_format)


def render_svg(graph: Graph) -> str:
    """Render ``graph`` to an SVG document."""
    return GraphRenderer().render_to_bytes(graph.source, output_format=OutputFormat.SVG).decode('utf-8')


def render_png(graph: Graph) -> bytes:
    """Render ``graph`` to PNG bytes."""
    return GraphRenderer().render_to_bytes(graph.source, output_format=OutputFormat.PNG)
