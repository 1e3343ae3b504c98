"""YAML loader with position tracking for in-place text patching."""

from __future__ import annotations

from ruamel.yaml import YAML
from ruamel.yaml.error import MarkedYAMLError, YAMLError
from ruamel.yaml.nodes import MappingNode, ScalarNode, SequenceNode
from ruamel.yaml.nodes import Node as RuamelNode

from relabel.models.errors import SourceSpan
from relabel.parser.nodes import Node, NodeKind
from relabel.settings import Settings


class WorkflowParseError(Exception):
    """Raised when the workflow text is not valid YAML."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        filename: str = "<string>",
    ) -> None:
        self.message = message
        self.line = line
        self.column = column
        self.filename = filename
        location = f" (line {line}, column {column})" if line is not None else ""
        super().__init__(f"unable to parse yaml: {message}{location}")

    @property
    def span(self) -> SourceSpan | None:
        if self.line is None or self.column is None:
            return None
        return SourceSpan(file=self.filename, line=self.line, column=self.column)


class YAMLSafetyError(Exception):
    """Raised when YAML input violates safety constraints.

    Distinct from parse errors: the text may be valid YAML but is too large,
    too deep or has too many nodes.
    """


class TrackedLoader:
    """Parses YAML into an immutable ``Node`` tree carrying source positions.

    Uses ruamel.yaml's composer, which keeps a start mark on every node, and
    never constructs Python objects from the document.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or Settings()
        self._max_document_size = settings.max_document_size
        self._max_node_count = settings.max_node_count
        self._max_depth = settings.max_depth

    # -- public loading API --------------------------------------------------

    def load_string(self, content: str, filename: str = "<string>") -> Node | None:
        """Parse ``content`` and return the root node of its first document.

        Returns ``None`` for an empty stream.
        """
        if len(content) > self._max_document_size:
            raise YAMLSafetyError(
                f"YAML document exceeds maximum size "
                f"({len(content):,} chars > {self._max_document_size:,} limit)"
            )
        yaml = YAML(typ="rt")
        try:
            documents = yaml.compose_all(content)
            try:
                root = next(documents, None)
            finally:
                documents.close()
        except MarkedYAMLError as exc:
            mark = exc.problem_mark or exc.context_mark
            message = exc.problem or exc.context or str(exc)
            if mark is None:
                raise WorkflowParseError(message, filename=filename) from exc
            raise WorkflowParseError(
                message, line=mark.line + 1, column=mark.column + 1, filename=filename
            ) from exc
        except YAMLError as exc:
            raise WorkflowParseError(str(exc), filename=filename) from exc
        except RecursionError as exc:
            raise YAMLSafetyError("YAML document exceeds maximum nesting depth") from exc

        if root is None:
            return None
        return _TreeBuilder(self._max_node_count, self._max_depth).build(root)


class _TreeBuilder:
    """Converts a composed ruamel.yaml node graph into ``Node`` objects."""

    def __init__(self, max_node_count: int, max_depth: int) -> None:
        self._max_node_count = max_node_count
        self._max_depth = max_depth
        self._count = 0
        self._seen: set[int] = set()

    def build(self, node: RuamelNode, depth: int = 1) -> Node:
        self._count += 1
        if self._count > self._max_node_count:
            raise YAMLSafetyError(
                f"YAML document exceeds maximum node count ({self._max_node_count:,})"
            )
        if depth > self._max_depth:
            raise YAMLSafetyError(
                f"YAML document exceeds maximum nesting depth ({self._max_depth})"
            )

        line = node.start_mark.line + 1
        column = node.start_mark.column + 1
        # The composer hands back the anchored node itself for every alias, still
        # carrying the anchor's start mark. Only the first visit is the definition.
        if id(node) in self._seen:
            return Node(NodeKind.ALIAS, line, column)
        self._seen.add(id(node))
        if isinstance(node, MappingNode):
            children: list[Node] = []
            for key, value in node.value:
                children.append(self.build(key, depth + 1))
                children.append(self.build(value, depth + 1))
            return Node(NodeKind.MAPPING, line, column, children=tuple(children))
        if isinstance(node, SequenceNode):
            items = tuple(self.build(item, depth + 1) for item in node.value)
            return Node(NodeKind.SEQUENCE, line, column, children=items)
        if isinstance(node, ScalarNode):
            return Node(NodeKind.SCALAR, line, column, value=node.value)
        raise WorkflowParseError(
            f"unexpected node type {type(node).__name__}", line=line, column=column
        )
