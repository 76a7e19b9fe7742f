# Scalings applied when a parameter's value is used in the model equations.
# Parameters are stored and estimated in the units they are reported in; these
# convert them to the quarterly model units.

def percent_to_decimal(x):
    return x / 100.0

def percent_to_gross(x):
    return 1.0 + x / 100.0

def discount_factor(x):
    """Converts 100(1/beta - 1) into the discount factor beta."""
    return 1.0 / (1.0 + x / 100.0)

def annual_to_quarterly_gross(x):
    """Converts an annualized net rate in percent into a quarterly gross rate."""
    return (1.0 + x / 100.0)**0.25

def annual_to_quarterly_probability(p):
    """Converts an annual event probability into a quarterly one."""
    return 1.0 - (1.0 - p)**0.25
