# Core engine: syntax tree extraction (ast_parser), rendering (diagrams),
# configuration and shared constants.
