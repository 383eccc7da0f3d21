"""
Payoff Commands - 收益计算命令

- payout: 计算指定结算价的赔付
- scenarios: 生成交易预览（情景表、盈亏平衡点、最佳收益价位）
"""

import json
import logging
from dataclasses import asdict

import click

from src.business.config.payoff_config import PayoffConfig
from src.data.utils.units import strikes_from_raw
from src.engine.payoff import (
    build_profit_scenarios,
    calc_max_payout,
    calc_num_contracts,
    calc_optimal_profit_price,
    calc_payout_at_price,
    calc_strike_width,
    classify_structure,
    find_breakevens,
    validate_strikes,
)


logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _resolve_strikes(strike: tuple[str, ...], raw: bool, config: PayoffConfig) -> list[float]:
    """解析并校验行权价（--raw 时按链上精度转换）"""
    if raw:
        strikes = strikes_from_raw(strike, config.strike_decimals)
    else:
        strikes = [float(s) for s in strike]
    return list(validate_strikes(strikes))


_strike_option = click.option(
    "--strike",
    "-k",
    multiple=True,
    required=True,
    help="行权价（按升序多次指定，1-4 个）",
)
_type_option = click.option(
    "--type",
    "-t",
    "option_type",
    type=click.Choice(["call", "put"], case_sensitive=False),
    default="call",
    help="期权类型",
)
_raw_option = click.option(
    "--raw",
    is_flag=True,
    help="行权价为链上定点整数（8 位小数）",
)
_verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="显示详细日志",
)


@click.command()
@_strike_option
@_type_option
@click.option(
    "--contracts",
    "-n",
    type=click.FloatRange(min=0),
    required=True,
    help="合约数量（可为小数）",
)
@click.option("--price", "-p", type=float, required=True, help="结算价")
@_raw_option
@_verbose_option
def payout(
    strike: tuple[str, ...],
    option_type: str,
    contracts: float,
    price: float,
    raw: bool,
    verbose: bool,
) -> None:
    """计算结算赔付

    \b
    示例：
      # 100/110 Call Spread，5 张，结算价 105
      optixel payout -k 100 -k 110 -n 5 -p 105

      # 90/100/110 Butterfly
      optixel payout -k 90 -k 100 -k 110 -n 2 -p 100
    """
    _setup_logging(verbose)
    config = PayoffConfig.load()

    try:
        strikes = _resolve_strikes(strike, raw, config)
    except ValueError as e:
        click.echo(f"❌ 行权价无效: {e}", err=True)
        raise SystemExit(1)

    is_call = option_type.lower() == "call"
    structure = classify_structure(len(strikes))
    width = calc_strike_width(strikes)
    result = calc_payout_at_price(strikes, is_call, contracts, price)

    click.echo(f"结构: {structure.value} {option_type.upper()} {strikes}")
    click.echo(f"宽度: {width:,.4f}")
    click.echo(f"最大赔付: {calc_max_payout(width, contracts):,.4f}")
    click.echo(f"结算价 {price:,.4f} 赔付: {result:,.4f}")


@click.command()
@_strike_option
@_type_option
@click.option("--investment", "-i", type=float, required=True, help="投入金额")
@click.option("--price-per-contract", "-c", type=float, required=True, help="每张合约权利金")
@click.option("--spot", "-s", type=float, default=None, help="当前标的价格（默认取第一个行权价）")
@click.option(
    "--output",
    "-o",
    type=click.Choice(["text", "json"]),
    default="text",
    help="输出格式",
)
@_raw_option
@_verbose_option
def scenarios(
    strike: tuple[str, ...],
    option_type: str,
    investment: float,
    price_per_contract: float,
    spot: float | None,
    output: str,
    raw: bool,
    verbose: bool,
) -> None:
    """生成交易预览：情景表、盈亏平衡点、最佳收益价位

    \b
    示例：
      optixel scenarios -k 3000 -i 100 -c 25
      optixel scenarios -k 2900 -k 3000 -t put -i 50 -c 12.5 -o json
    """
    _setup_logging(verbose)
    config = PayoffConfig.load()

    try:
        strikes = _resolve_strikes(strike, raw, config)
    except ValueError as e:
        click.echo(f"❌ 行权价无效: {e}", err=True)
        raise SystemExit(1)

    is_call = option_type.lower() == "call"
    spot = spot if spot is not None else strikes[0]
    contracts = calc_num_contracts(investment, price_per_contract)

    rows = build_profit_scenarios(
        strikes,
        is_call,
        investment,
        price_per_contract,
        offsets=config.scenario_offsets,
    )
    target = calc_optimal_profit_price(strikes, is_call, spot, config.vanilla_target_move)

    range_pct = config.chart.range_pct
    breakevens = find_breakevens(
        strikes,
        is_call,
        contracts,
        investment,
        low=strikes[0] * (1 - range_pct),
        high=strikes[-1] * (1 + range_pct),
    )
    logger.debug(f"{len(breakevens)} breakeven(s) within ±{range_pct:.0%} of the strikes")

    if output == "json":
        click.echo(
            json.dumps(
                {
                    "structure": classify_structure(len(strikes)).value,
                    "contracts": contracts,
                    "scenarios": [asdict(r) for r in rows],
                    "breakevens": breakevens,
                    "target": asdict(target),
                },
                indent=2,
            )
        )
        return

    click.echo(f"📈 {classify_structure(len(strikes)).value} {option_type.upper()} {strikes}")
    click.echo(f"合约数: {contracts:.4f}")
    click.echo("-" * 50)
    for row in rows:
        sign = "+" if row.profit >= 0 else ""
        click.echo(
            f"{row.label:<12} {row.price:>12,.2f}  {sign}{row.profit:,.2f} "
            f"({sign}{row.profit_percent:.1f}% ROI)"
        )
    click.echo("-" * 50)
    if breakevens:
        click.echo("盈亏平衡: " + ", ".join(f"{b:,.2f}" for b in breakevens))
    click.echo(f"最佳收益: {target.label}")
