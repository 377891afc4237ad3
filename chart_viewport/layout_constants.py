from kivy.metrics import dp


# The room between the content rect with margins and the content rect, in density-independent pixels
DEFAULT_COMMON_MARGIN_DP = 4


common_margin_dp = DEFAULT_COMMON_MARGIN_DP


def get_common_margin_dp():
    return common_margin_dp


def set_common_margin_dp(margin_dp):
    global common_margin_dp
    common_margin_dp = margin_dp


def default_margin():
    """The common margin in whole (physical) pixels, rounded half up."""
    return int(dp(get_common_margin_dp()) + 0.5)
