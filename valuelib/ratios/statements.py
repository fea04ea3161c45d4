"""Financial statement ratios."""


# liquidity
def current_ratio(current_assets: float, current_liabilities: float) -> float:
    return current_assets / current_liabilities


def quick_ratio(current_assets: float, inventory: float, current_liabilities: float) -> float:
    return (current_assets - inventory) / current_liabilities


def cash_ratio(cash_and_equivalents: float, current_liabilities: float) -> float:
    return cash_and_equivalents / current_liabilities


# profitability
def gross_margin(gross_profit: float, revenue: float) -> float:
    return gross_profit / revenue


def operating_margin(operating_income: float, revenue: float) -> float:
    return operating_income / revenue


def net_margin(net_income: float, revenue: float) -> float:
    return net_income / revenue


def return_on_assets(net_income: float, total_assets: float) -> float:
    return net_income / total_assets


def return_on_equity(net_income: float, shareholders_equity: float) -> float:
    return net_income / shareholders_equity


# leverage
def debt_to_equity(total_debt: float, shareholders_equity: float) -> float:
    return total_debt / shareholders_equity


def debt_ratio(total_debt: float, total_assets: float) -> float:
    return total_debt / total_assets


def interest_coverage(ebit: float, interest_expense: float) -> float:
    return ebit / interest_expense


# activity
def inventory_turnover(cost_of_goods_sold: float, average_inventory: float) -> float:
    return cost_of_goods_sold / average_inventory


def receivables_turnover(revenue: float, average_accounts_receivable: float) -> float:
    return revenue / average_accounts_receivable


def asset_turnover(revenue: float, total_assets: float) -> float:
    return revenue / total_assets
