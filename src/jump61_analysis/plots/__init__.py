from .chart import plot_histograms, plot_scatter, plot_side_split, plot_top_bar

__all__ = ["plot_histograms", "plot_scatter", "plot_side_split", "plot_top_bar"]
