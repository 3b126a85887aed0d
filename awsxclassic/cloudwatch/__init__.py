from .metric import Metric, statistic_string
