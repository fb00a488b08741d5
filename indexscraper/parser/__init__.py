"""indexscraper.parser: turning index markup into instance URLs."""

from indexscraper.parser.index_parser import parse_index

__all__ = ["parse_index"]
