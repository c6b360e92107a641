from .chart import bar_order, plot_metric_bar, plot_side_split

__all__ = ["bar_order", "plot_metric_bar", "plot_side_split"]
