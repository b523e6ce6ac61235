"""Impl blocks -> diagram method lines."""

import logging
from typing import TYPE_CHECKING, List

import tree_sitter

from .models import MethodSignature, Parameter, Visibility
from .type_normalizer import normalize_return_type
from .utils import is_path_type, node_text, path_type_name
from .visibility import resolve_visibility

if TYPE_CHECKING:
    from ..diagrams.formatter import ClassDiagramFormatter

logger = logging.getLogger(__name__)


class MethodExtractor:
    """Extracts rendered method lines from one `impl_item`.

    Functions without a visibility modifier inherit the class visibility
    inside a trait impl and are private inside an inherent impl.
    """

    def __init__(self, formatter: "ClassDiagramFormatter"):
        self.formatter = formatter

    def extract(
        self,
        node: tree_sitter.Node,
        source: bytes,
        class_name: str,
        class_visibility: Visibility,
    ) -> List[str]:
        """Render every function of an impl block, in declaration order.

        Raises:
            ValueError: If a return type cannot be represented
        """
        lines: List[str] = []
        for signature in self.iter_signatures(node, source, class_name, class_visibility):
            lines.append(
                self.formatter.render_method(
                    class_name,
                    self.formatter.render_visibility(signature.visibility),
                    signature.name,
                    signature.parameters,
                    signature.return_type,
                )
            )
        return lines

    def iter_signatures(
        self,
        node: tree_sitter.Node,
        source: bytes,
        class_name: str,
        class_visibility: Visibility,
    ):
        if node.child_by_field_name("trait") is not None:
            default_vis = class_visibility
        else:
            default_vis = Visibility.PRIVATE

        body = node.child_by_field_name("body")
        if body is None:
            return

        for child in body.named_children:
            if child.type == "function_item":
                yield self._signature(child, source, class_name, default_vis)

    def _signature(
        self,
        node: tree_sitter.Node,
        source: bytes,
        class_name: str,
        default_vis: Visibility,
    ) -> MethodSignature:
        name = node_text(node.child_by_field_name("name"), source)

        return_node = node.child_by_field_name("return_type")
        if return_node is None:
            return_type = ""
        else:
            return_type = normalize_return_type(return_node, source, class_name)

        return MethodSignature(
            name=name,
            visibility=resolve_visibility(node, source, default_vis),
            parameters=self._parameters(node, source, name),
            return_type=return_type,
        )

    @staticmethod
    def _parameters(node: tree_sitter.Node, source: bytes, method: str) -> List[Parameter]:
        """Collect (name, type) pairs of plain `ident: Path` parameters.

        Receivers are skipped silently; any other pattern or type shape is
        dropped with a warning.
        """
        params: List[Parameter] = []
        parameters = node.child_by_field_name("parameters")
        if parameters is None:
            return params

        for param in parameters.named_children:
            if param.type in ("self_parameter", "attribute_item", "line_comment", "block_comment"):
                continue

            if param.type != "parameter":
                logger.warning(f"Failed to parse inputs of fn {method}")
                continue

            pattern = param.child_by_field_name("pattern")
            type_node = param.child_by_field_name("type")
            if pattern is not None and pattern.type == "self":
                # Typed receiver, e.g. `self: Box<Self>`
                continue
            if pattern is None or pattern.type != "identifier" or not is_path_type(type_node):
                logger.warning(
                    f"Failed to parse inputs of fn {method} "
                    f"(parameter: `{node_text(param, source)}`)"
                )
                continue

            params.append(Parameter(
                name=node_text(pattern, source),
                type_name=path_type_name(type_node, source),
            ))

        return params
