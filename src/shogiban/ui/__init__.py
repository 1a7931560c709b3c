"""Qt presentation layer for shogi diagrams."""
