"""Classic competitive-programming algorithms: DP, graphs, trees and segment trees."""

__version__ = "0.1.0"
__all__ = ["basics", "dp", "sequences", "graphs", "trees", "segment_tree"]