import logging
import numpy as np
from scipy.stats import norm
from ..model import AbstractModel, Parameter, SteadyStateParameter
from ..settings import default_settings, default_test_settings
from ..frictions import *
from ..errors import SteadyStateDomainError
from ..solvers.rootfind import find_root
from ..utils.indices import build_indices, anticipated_names
from ..utils.transformations import (percent_to_decimal, percent_to_gross, discount_factor,
                                     annual_to_quarterly_gross, annual_to_quarterly_probability)
from ..priors import Normal, BetaAlt, GammaAlt, RootInverseGamma

logger = logging.getLogger(__name__)

SUBSPECS = ("ss8",)

def _check_finite(ss, *names):
    bad = [name for name in names if not np.isfinite(ss[name])]
    if bad:
        raise SteadyStateDomainError(f"non-finite steady-state values: {', '.join(bad)}")

class Model994(AbstractModel):
    """
    FRBNY DSGE model m994: a medium-scale New Keynesian model with financial
    frictions (BGG), anticipated monetary policy shocks and long-run inflation
    expectations.

    Construction declares settings, parameters and steady-state values, builds
    the index tables and computes the steady state. Afterwards only values
    change: call recompute_steady_state() after updating parameters.
    """
    spec = "m994"

    def __init__(self, subspec="ss8", seed=0):
        if subspec not in SUBSPECS:
            raise ValueError(f"Unknown subspec {subspec!r} for m994, expected one of {SUBSPECS}")
        super().__init__(seed=seed)
        self.subspec = subspec
        self.rootfind_fallbacks = 0
        self.sigma_omega_solution = None

        self.init_settings()
        self.init_parameters()
        self.init_steady_state()
        self.close()
        self.init_model_indices()
        self.steadystate()
        logger.debug("Constructed %s with %d parameters", self.description(), len(self.parameters))

    def description(self):
        return f"FRBNY DSGE Model m994, {self.subspec}"

    def __repr__(self):
        return f"Model994(subspec={self.subspec!r})"

    def init_settings(self):
        for s in default_settings():
            self.add_setting(s)
        for s in default_test_settings():
            self.add_test_setting(s)

    def init_parameters(self):
        P = Parameter
        self.add_parameter(P("alp", 0.1596, (1e-5, 0.999), (1e-5, 0.999), "square_root", Normal(0.30, 0.05),
                             description="Capital share in the intermediate goods production function.", tex_label="\\alpha"))
        self.add_parameter(P("zeta_p", 0.8940, (1e-5, 0.999), (1e-5, 0.999), "square_root", BetaAlt(0.5, 0.1),
                             description="Calvo parameter: fraction of firms that cannot reoptimize prices.", tex_label="\\zeta_p"))
        self.add_parameter(P("iota_p", 0.1865, (1e-5, 0.999), (1e-5, 0.999), "square_root", BetaAlt(0.5, 0.15),
                             description="Indexation of non-optimized prices to last period's inflation.", tex_label="\\iota_p"))
        self.add_parameter(P("delta", 0.025, fixed=True,
                             description="Capital depreciation rate.", tex_label="\\delta"))
        self.add_parameter(P("Upsilon", 1.000, (0., 10.), (1e-5, 0.), "exponential", GammaAlt(1., 0.5), fixed=True,
                             description="Trend growth of investment-specific technology.", tex_label="\\mathcal{\\Upsilon}"))
        self.add_parameter(P("Phi", 1.1066, (1., 10.), (1.00, 10.00), "exponential", Normal(1.25, 0.12),
                             description="Fixed costs in production.", tex_label="\\Phi"))
        self.add_parameter(P("S2", 2.7314, (-15., 15.), (-15., 15.), "untransformed", Normal(4., 1.5),
                             description="Second derivative of the investment adjustment cost function.", tex_label="S''"))
        self.add_parameter(P("h", 0.5347, (1e-5, 0.999), (1e-5, 0.999), "square_root", BetaAlt(0.7, 0.1),
                             description="Consumption habit persistence.", tex_label="h"))
        self.add_parameter(P("ppsi", 0.6862, (1e-5, 0.999), (1e-5, 0.999), "square_root", BetaAlt(0.5, 0.15),
                             description="Elasticity of capital utilization costs.", tex_label="\\psi"))
        self.add_parameter(P("nu_l", 2.5975, (1e-5, 10.), (1e-5, 10.), "exponential", Normal(2, 0.75),
                             description="Curvature of the disutility of labor.", tex_label="\\nu_l"))
        self.add_parameter(P("zeta_w", 0.9291, (1e-5, 0.999), (1e-5, 0.999), "square_root", BetaAlt(0.5, 0.1),
                             description="Calvo parameter for wages.", tex_label="\\zeta_w"))
        self.add_parameter(P("iota_w", 0.2992, (1e-5, 0.999), (1e-5, 0.999), "square_root", BetaAlt(0.5, 0.15),
                             description="Indexation of non-optimized wages to last period's inflation.", tex_label="\\iota_w"))
        self.add_parameter(P("lambda_w", 1.5000, fixed=True,
                             description="Steady-state wage markup.", tex_label="\\lambda_w"))
        self.add_parameter(P("bet", 0.1402, (1e-5, 10.), (1e-5, 10.), "exponential", GammaAlt(0.25, 0.1),
                             scaling=discount_factor,
                             description="Discount rate, reported as 100(1/beta - 1).", tex_label="100(\\beta^{-1} - 1)"))
        self.add_parameter(P("psi1", 1.3679, (1e-5, 10.), (1e-5, 10.00), "exponential", Normal(1.5, 0.25),
                             description="Weight on inflation gap in the monetary policy rule.", tex_label="\\psi_1"))
        self.add_parameter(P("psi2", 0.0388, (-0.5, 0.5), (-0.5, 0.5), "untransformed", Normal(0.12, 0.05),
                             description="Weight on output gap in the monetary policy rule.", tex_label="\\psi_2"))
        self.add_parameter(P("psi3", 0.2464, (-0.5, 0.5), (-0.5, 0.5), "untransformed", Normal(0.12, 0.05),
                             description="Weight on the change of the output gap in the monetary policy rule.", tex_label="\\psi_3"))
        self.add_parameter(P("pi_star", 0.5000, (1e-5, 10.), (1e-5, 10.), "exponential", GammaAlt(0.75, 0.4), fixed=True,
                             scaling=percent_to_gross,
                             description="Steady-state quarterly inflation, in percent.", tex_label="\\pi_*"))
        self.add_parameter(P("sigma_c", 0.8719, (1e-5, 10.), (1e-5, 10.), "exponential", Normal(1.5, 0.37),
                             description="Coefficient of relative risk aversion.", tex_label="\\sigma_{c}"))
        self.add_parameter(P("rho", 0.7126, (1e-5, 0.999), (1e-5, 0.999), "square_root", BetaAlt(0.75, 0.10),
                             description="Interest rate smoothing in the monetary policy rule.", tex_label="\\rho"))
        self.add_parameter(P("epsilon_p", 10.000, fixed=True,
                             description="Curvature of the Kimball aggregator for prices.", tex_label="\\varepsilon_{p}"))
        self.add_parameter(P("epsilon_w", 10.000, fixed=True,
                             description="Curvature of the Kimball aggregator for wages.", tex_label="\\varepsilon_{w}"))

        # financial frictions parameters
        self.add_parameter(P("Fomega", 0.0300, (1e-5, 0.99999), (1e-5, 0.99), "square_root", BetaAlt(0.03, 0.01), fixed=True,
                             scaling=annual_to_quarterly_probability,
                             description="Annual default probability of entrepreneurs, F(omega bar).", tex_label="F(\\omega)"))
        self.add_parameter(P("spr", 1.7444, (0., 100.), (1e-5, 0.), "exponential", GammaAlt(2., 0.1),
                             scaling=annual_to_quarterly_gross,
                             description="Steady-state annualized credit spread, in percent.", tex_label="SP_*"))
        self.add_parameter(P("zeta_spb", 0.0559, (1e-5, 0.99999), (1e-5, 0.99), "square_root", BetaAlt(0.05, 0.005),
                             description="Elasticity of the expected excess return on capital with respect to leverage.",
                             tex_label="\\zeta_{sp,b}"))
        self.add_parameter(P("gamma_star", 0.9900, (1e-5, 0.99999), (1e-5, 0.99), "square_root", BetaAlt(0.99, 0.002), fixed=True,
                             description="Survival rate of entrepreneurs.", tex_label="\\gamma_*"))

        # exogenous processes - level
        self.add_parameter(P("gam", 0.3673, (-5.0, 5.0), (-5., 5.), "untransformed", Normal(0.4, 0.1),
                             scaling=percent_to_decimal,
                             description="Steady-state growth rate of technology, in percent.", tex_label="100\\gamma"))
        self.add_parameter(P("Lmean", -45.9364, (-1000., 1000.), (-1e3, 1e3), "untransformed", Normal(-45, 5),
                             description="Mean level of hours.", tex_label="\\bar{L}"))
        self.add_parameter(P("g_star", 0.1800, fixed=True,
                             description="Steady-state government spending to GDP ratio.", tex_label="g_*"))

        # exogenous processes - autocorrelation
        for name, value, fixed, prior, label in [
                ("rho_g", 0.9863, False, BetaAlt(0.5, 0.2), "government spending"),
                ("rho_b", 0.9410, False, BetaAlt(0.5, 0.2), "intertemporal preference shifter"),
                ("rho_mu", 0.8735, False, BetaAlt(0.5, 0.2), "marginal efficiency of investment"),
                ("rho_z", 0.9446, False, BetaAlt(0.5, 0.2), "technology"),
                ("rho_lambda_f", 0.8827, False, BetaAlt(0.5, 0.2), "price markup"),
                ("rho_lambda_w", 0.3884, False, BetaAlt(0.5, 0.2), "wage markup"),
                ("rho_rm", 0.2135, False, BetaAlt(0.5, 0.2), "monetary policy shock")]:
            self.add_parameter(P(name, value, (1e-5, 0.999), (1e-5, 0.999), "square_root", prior, fixed=fixed,
                                 description=f"AR(1) coefficient of the {label} process.",
                                 tex_label=f"\\rho_{{{name[4:]}}}"))

        self.add_parameter(P("rho_sigma_w", 0.9898, (1e-5, 0.99999), (1e-5, 0.99), "square_root", BetaAlt(0.75, 0.15),
                             description="AR(1) coefficient of the idiosyncratic risk (spread shock) process.",
                             tex_label="\\rho_{\\sigma_\\omega}"))
        self.add_parameter(P("rho_mu_e", 0.7500, (1e-5, 0.99999), (1e-5, 0.99), "square_root", BetaAlt(0.75, 0.15), fixed=True,
                             description="AR(1) coefficient of the bankruptcy cost process.", tex_label="\\rho_{\\mu_e}"))
        self.add_parameter(P("rho_gamma", 0.7500, (1e-5, 0.99999), (1e-5, 0.99), "square_root", BetaAlt(0.75, 0.15), fixed=True,
                             description="AR(1) coefficient of the entrepreneurs' survival rate process.",
                             tex_label="\\rho_{\\gamma}"))
        self.add_parameter(P("rho_pi_star", 0.9900, (1e-5, 0.999), (1e-5, 0.999), "square_root", BetaAlt(0.5, 0.2), fixed=True,
                             description="AR(1) coefficient of the time-varying inflation target.", tex_label="\\rho_{\\pi^*}"))

        for name, value, label in [
                ("rho_lr", 0.6936, "long-term rate measurement error"),
                ("rho_z_p", 0.8910, "persistent technology growth"),
                ("rho_tfp", 0.1953, "TFP measurement error"),
                ("rho_gdpdef", 0.5379, "GDP deflator measurement error"),
                ("rho_pce", 0.2320, "core PCE measurement error")]:
            self.add_parameter(P(name, value, (1e-5, 0.999), (1e-5, 0.999), "square_root", BetaAlt(0.5, 0.2),
                                 description=f"AR(1) coefficient of the {label} process.",
                                 tex_label=f"\\rho_{{{name[4:]}}}"))

        self.add_parameter(P("rho_gdp", 0.0, (-0.999, 0.999), (-0.999, 0.999), "square_root", Normal(0.0, 0.2),
                             description="AR(1) coefficient of GDP measurement error.", tex_label="\\rho_{gdp}"))
        self.add_parameter(P("rho_gdy", 0.0, (-0.999, 0.999), (-0.999, 0.999), "square_root", Normal(0.0, 0.2),
                             description="AR(1) coefficient of GDI measurement error.", tex_label="\\rho_{gdy}"))
        self.add_parameter(P("varrho_gdp", 0.0, (-0.999, 0.999), (-0.999, 0.999), "square_root", Normal(0.0, 0.4),
                             description="Correlation between GDP and GDI measurement errors.", tex_label="\\varrho_{gdp}"))
        self.add_parameter(P("me_level", 1.0, fixed=True,
                             description="1 if measurement error is in levels, 0 if in growth rates.", tex_label="me_{level}"))

        # exogenous processes - standard deviation
        for name, value, label in [
                ("sigma_g", 2.5230, "government spending"),
                ("sigma_b", 0.0292, "intertemporal preference shifter"),
                ("sigma_mu", 0.4559, "marginal efficiency of investment"),
                ("sigma_z", 0.6742, "technology"),
                ("sigma_lambda_f", 0.1314, "price markup"),
                ("sigma_lambda_w", 0.3864, "wage markup"),
                ("sigma_rm", 0.2380, "monetary policy")]:
            self.add_parameter(P(name, value, (1e-8, 5.), (1e-8, 5.), "exponential", RootInverseGamma(2., 0.10),
                                 description=f"Standard deviation of the {label} shock.",
                                 tex_label=f"\\sigma_{{{name[6:]}}}"))

        self.add_parameter(P("sigma_sigma_omega", 0.0428, (1e-7, 100.), (1e-5, 0.), "exponential", RootInverseGamma(4., 0.05),
                             description="Standard deviation of the idiosyncratic risk (spread) shock.",
                             tex_label="\\sigma_{\\sigma_\\omega}"))
        self.add_parameter(P("sigma_mu_e", 0.0000, (1e-7, 100.), (1e-5, 0.), "exponential", RootInverseGamma(4., 0.05), fixed=True,
                             description="Standard deviation of the bankruptcy cost shock.", tex_label="\\sigma_{\\mu_e}"))
        self.add_parameter(P("sigma_gamma", 0.0000, (1e-7, 100.), (1e-5, 0.), "exponential", RootInverseGamma(4., 0.01), fixed=True,
                             description="Standard deviation of the survival rate shock.", tex_label="\\sigma_{\\gamma}"))
        self.add_parameter(P("sigma_pi_star", 0.0269, (1e-8, 5.), (1e-8, 5.), "exponential", RootInverseGamma(6., 0.03),
                             description="Standard deviation of the inflation target shock.", tex_label="\\sigma_{\\pi^*}"))
        self.add_parameter(P("sigma_lr", 0.1766, (1e-8, 10.), (1e-8, 5.), "exponential", RootInverseGamma(2., 0.75),
                             description="Standard deviation of long-term rate measurement error.", tex_label="\\sigma_{lr}"))

        for name, value, label in [
                ("sigma_z_p", 0.1662, "persistent technology growth shock"),
                ("sigma_tfp", 0.9391, "TFP measurement error"),
                ("sigma_gdpdef", 0.1575, "GDP deflator measurement error"),
                ("sigma_pce", 0.0999, "core PCE measurement error"),
                ("sigma_gdp", 0.1, "GDP measurement error"),
                ("sigma_gdy", 0.1, "GDI measurement error")]:
            self.add_parameter(P(name, value, (1e-8, 5.), (1e-8, 5.), "exponential", RootInverseGamma(2., 0.10),
                                 description=f"Standard deviation of the {label}.",
                                 tex_label=f"\\sigma_{{{name[6:]}}}"))

        # standard deviations of the anticipated policy shocks; padding slots are inactive
        for i in range(1, self.num_anticipated_shocks_padding + 1):
            if i <= self.num_anticipated_shocks:
                self.add_parameter(P(f"sigma_rm{i}", 0.2, (1e-7, 100.), (1e-5, 0.), "exponential",
                                     RootInverseGamma(4., .2),
                                     description=f"Standard deviation of the {i}-period-ahead anticipated policy shock.",
                                     tex_label=f"\\sigma_{{ant{i}}}"))
            else:
                self.add_parameter(P(f"sigma_rm{i}", 0.0, (1e-7, 100.), (1e-5, 0.), "exponential",
                                     RootInverseGamma(4., .2), fixed=True,
                                     description=f"Inactive {i}-period-ahead anticipated policy shock slot.",
                                     tex_label=f"\\sigma_{{ant{i}}}"))

        self.add_parameter(P("eta_gz", 0.8400, (1e-5, 0.999), (1e-5, 0.999), "square_root", BetaAlt(0.50, 0.20),
                             description="Correlation of government spending and technology shocks.", tex_label="\\eta_{gz}"))
        self.add_parameter(P("eta_lambda_f", 0.7892, (1e-5, 0.999), (1e-5, 0.999), "square_root", BetaAlt(0.50, 0.20),
                             description="MA(1) coefficient of the price markup shock.", tex_label="\\eta_{\\lambda_f}"))
        self.add_parameter(P("eta_lambda_w", 0.4226, (1e-5, 0.999), (1e-5, 0.999), "square_root", BetaAlt(0.50, 0.20),
                             description="MA(1) coefficient of the wage markup shock.", tex_label="\\eta_{\\lambda_w}"))
        self.add_parameter(P("modelalp_ind", 0.0000, (0., 1.), (0., 0.), "untransformed", BetaAlt(0.50, 0.20), fixed=True,
                             description="1 to use the model's alpha in the utilization adjustment of TFP.",
                             tex_label="i_{\\alpha}^{model}"))
        self.add_parameter(P("Gamma_gdpdef", 1.0354, (-10., 10.), (-10., -10.), "untransformed", Normal(1.00, 2.),
                             description="Loading of GDP deflator inflation on model inflation.", tex_label="\\Gamma_{gdpdef}"))
        self.add_parameter(P("delta_gdpdef", 0.0181, (-9.1, 9.1), (-10., -10.), "untransformed", Normal(0.00, 2.),
                             description="Mean of GDP deflator inflation in excess of model inflation.",
                             tex_label="\\delta_{gdpdef}"))
        self.add_parameter(P("gamma_gdy", 1.0, (-10., 10.), (-10., -10.), "untransformed", Normal(1.0, 2.0), fixed=True,
                             description="Loading of GDI growth on model output growth.", tex_label="\\gamma_{gdy}"))
        self.add_parameter(P("delta_gdy", 0.0, (-10., 10.), (-10., -10.), "untransformed", Normal(0.0, 2.0), fixed=True,
                             description="Mean of GDI growth in excess of model output growth.", tex_label="\\delta_{gdy}"))

    def init_steady_state(self):
        for name, description in [
                ("zstar", "Steady-state growth rate of productivity"),
                ("rstar", "Steady-state gross real interest rate"),
                ("Rstarn", "Steady-state net nominal interest rate, in percent"),
                ("rkstar", "Steady-state net rental rate of capital"),
                ("wstar", "Steady-state real wage"),
                ("Lstar", "Steady-state hours"),
                ("kstar", "Effective capital that households rent to firms in the steady state"),
                ("kbarstar", "Total capital owned by households in the steady state"),
                ("istar", "Detrended steady-state investment"),
                ("ystar", "Detrended steady-state output"),
                ("cstar", "Detrended steady-state consumption"),
                ("wl_c", "Steady-state labor share of consumption, net of the wage markup"),
                ("zomega_star", "Standardized default threshold of entrepreneurs"),
                ("sigma_omega_star", "Steady-state dispersion of entrepreneurs' idiosyncratic returns"),
                ("omega_bar_star", "Default threshold of entrepreneurs' idiosyncratic returns"),
                ("mu_estar", "Bankruptcy cost share"),
                ("nkstar", "Net worth to capital ratio"),
                ("Rhostar", "Leverage, capital to net worth minus one"),
                ("wekstar", "Entrepreneurs' transfers to capital ratio"),
                ("vkstar", "Entrepreneurs' equity to capital ratio"),
                ("nstar", "Steady-state entrepreneurs' net worth"),
                ("vstar", "Steady-state entrepreneurs' equity"),
                ("zeta_sp_sigma_omega", "Elasticity of the spread to idiosyncratic risk"),
                ("zeta_sp_mu_e", "Elasticity of the spread to bankruptcy costs"),
                ("zeta_nRk", "Elasticity of net worth to the return on capital"),
                ("zeta_nR", "Elasticity of net worth to the nominal interest rate"),
                ("zeta_nqk", "Elasticity of net worth to the value of capital"),
                ("zeta_nn", "Elasticity of net worth to lagged net worth"),
                ("zeta_nmu_e", "Elasticity of net worth to bankruptcy costs"),
                ("zeta_nsigma_omega", "Elasticity of net worth to idiosyncratic risk")]:
            self.add_steady_state(SteadyStateParameter(name, np.nan, description=description))

    def init_model_indices(self):
        n_ant = self.num_anticipated_shocks

        # Endogenous states
        states = [
            "y_t", "c_t", "i_t", "qk_t", "k_t", "kbar_t", "u_t", "rk_t", "Rktil_t", "n_t", "mc_t",
            "pi_t", "mu_omega_t", "w_t", "L_t", "R_t", "g_t", "b_t", "mu_t", "z_t", "lambda_f_t", "lambda_f_t1",
            "lambda_w_t", "lambda_w_t1", "rm_t", "sigma_omega_t", "mu_e_t", "gamma_t", "pi_star_t", "Ec_t", "Eqk_t",
            "Ei_t", "Epi_t", "EL_t", "Erk_t", "Ew_t", "ERktil_t", "y_f_t", "c_f_t", "i_f_t", "qk_f_t", "k_f_t",
            "kbar_f_t", "u_f_t", "rk_f_t", "w_f_t", "L_f_t", "r_f_t", "Ec_f_t", "Eqk_f_t", "Ei_f_t",
            "EL_f_t", "Erk_f_t", "ztil_t", "pi_t1", "pi_t2", "pi_a_t", "R_t1", "zp_t", "Ez_t"
        ]
        self.endogenous_states = build_indices(states, anticipated_names("rm_tl", n_ant))

        # Shocks
        shocks = [
            "g_sh", "b_sh", "mu_sh", "z_sh", "lambda_f_sh", "lambda_w_sh", "rm_sh", "sigma_omega_sh", "mu_e_sh",
            "gamma_sh", "pi_star_sh", "lr_sh", "zp_sh", "tfp_sh", "gdpdef_sh", "pce_sh", "gdp_sh", "gdy_sh"
        ]
        self.exogenous_shocks = build_indices(shocks, anticipated_names("rm_shl", n_ant))

        # Expectations
        expected = [
            "Ec_sh", "Eqk_sh", "Ei_sh", "Epi_sh", "EL_sh", "Erk_sh", "Ew_sh", "ERktil_sh", "Ec_f_sh",
            "Eqk_f_sh", "Ei_f_sh", "EL_f_sh", "Erk_f_sh"
        ]
        self.expected_shocks = build_indices(expected)

        # Equations
        eqs = [
            "euler", "inv", "capval", "spread", "nevol", "output", "caputl", "capsrv", "capev",
            "mkupp", "phlps", "caprnt", "msub", "wage", "mp", "res", "eq_g", "eq_b", "eq_mu", "eq_z",
            "eq_lambda_f", "eq_lambda_w", "eq_rm", "eq_sigma_omega", "eq_mu_e", "eq_gamma", "eq_lambda_f1",
            "eq_lambda_w1", "eq_Ec", "eq_Eqk", "eq_Ei", "eq_Epi", "eq_EL", "eq_Erk", "eq_Ew", "eq_ERktil",
            "euler_f", "inv_f", "capval_f", "output_f", "caputl_f", "capsrv_f", "capev_f", "mkupp_f",
            "caprnt_f", "msub_f", "res_f", "eq_Ec_f", "eq_Eqk_f", "eq_Ei_f", "eq_EL_f", "eq_Erk_f",
            "eq_ztil", "eq_pi_star", "pi1", "pi2", "pi_a", "Rt1", "eq_zp", "eq_Ez"
        ]
        self.equilibrium_conditions = build_indices(eqs, anticipated_names("eq_rml", n_ant))

        # Lagged states and measurement errors added after the model is solved
        aug = [
            "y_t1", "c_t1", "i_t1", "w_t1", "pi_t1", "L_t1", "Et_pi_t", "lr_t", "tfp_t", "e_gdpdef",
            "e_pce", "u_t1", "e_gdp_t", "e_gdy_t", "e_gdp_t1", "e_gdy_t1"
        ]
        self.endogenous_states_augmented = build_indices(aug, offset=self.n_states)

        # Observables
        obs = [
            "g_y", "g_hours", "g_w", "pi_gdpdef", "pi_pce", "R_n", "g_c", "g_i", "sprd",
            "pi_long", "R_long", "tfp", "g_income"
        ]
        self.observables = build_indices(obs, anticipated_names("R_n", n_ant))

    def solve_sigma_omega(self, zomega_star, spr, zeta_spb):
        """
        Solves zeta_spb(zomega_star, sigma, spr) = zeta_spb for sigma.

        Returns a Converged result, or FellBackTo(initial guess) when no root
        is found. Fallbacks are logged and counted in self.rootfind_fallbacks.
        """
        guess = self.get_setting("rootfind_initial_guess")

        def objective(sigma):
            return ζ_spb_fn(zomega_star, sigma, spr) - zeta_spb

        result = find_root(objective, guess, bracket=(1e-5, 2.0),
                           maxiter=self.get_setting("rootfind_maxiter"))
        if not result.converged:
            self.rootfind_fallbacks += 1
            logger.warning("No sigma_omega_star solves zeta_spb = %s (spread %s); using %s. %s",
                           zeta_spb, spr, result.value, result.reason)
        self.sigma_omega_solution = result
        return result

    def steadystate(self):
        """
        (Re)calculates the steady-state values from the current parameters and
        publishes them together once every value has been computed.
        """
        m = self.scaled_values()
        ss = {}

        ss["zstar"]    = np.log(1+m["gam"]) + m["alp"]/(1-m["alp"])*np.log(m["Upsilon"])
        ss["rstar"]    = np.exp(m["sigma_c"]*ss["zstar"]) / m["bet"]
        ss["Rstarn"]   = 100*(ss["rstar"]*m["pi_star"] - 1)
        ss["rkstar"]   = m["spr"]*ss["rstar"]*m["Upsilon"] - (1-m["delta"])
        if not ss["rkstar"] > 0:
            raise SteadyStateDomainError(f"rental rate of capital must be positive, got rkstar = {ss['rkstar']}")
        ss["wstar"]    = (m["alp"]**m["alp"] * (1-m["alp"])**(1-m["alp"]) * ss["rkstar"]**(-m["alp"]) / m["Phi"])**(1/(1-m["alp"]))
        ss["Lstar"]    = 1.
        ss["kstar"]    = (m["alp"]/(1-m["alp"])) * ss["wstar"] * ss["Lstar"] / ss["rkstar"]
        ss["kbarstar"] = ss["kstar"] * (1+m["gam"]) * m["Upsilon"]**(1 / (1-m["alp"]))
        ss["istar"]    = ss["kbarstar"] * (1-((1-m["delta"])/((1+m["gam"]) * m["Upsilon"]**(1/(1-m["alp"])))))
        ss["ystar"]    = (ss["kstar"]**m["alp"]) * (ss["Lstar"]**(1-m["alp"])) / m["Phi"]
        ss["cstar"]    = (1-m["g_star"])*ss["ystar"] - ss["istar"]
        _check_finite(ss, "wstar", "kstar", "ystar")
        if not ss["cstar"] > 0:
            raise SteadyStateDomainError(f"consumption must be positive, got cstar = {ss['cstar']}")
        ss["wl_c"]     = (ss["wstar"]*ss["Lstar"])/(ss["cstar"]*m["lambda_w"])

        # FINANCIAL FRICTIONS ADDITIONS
        # solve for sigma_omega_star and zomega_star
        spr = m["spr"]
        zomega_star = norm.ppf(m["Fomega"])
        sigma_omega_star = self.solve_sigma_omega(zomega_star, spr, m["zeta_spb"]).value
        ss["zomega_star"] = zomega_star
        ss["sigma_omega_star"] = sigma_omega_star

        # evaluate omega_bar_star
        omega_bar_star = ω_fn(zomega_star, sigma_omega_star)
        ss["omega_bar_star"] = omega_bar_star

        # evaluate all BGG function elasticities
        Gstar                    = G_fn(zomega_star, sigma_omega_star)
        Gammastar                = Γ_fn(zomega_star, sigma_omega_star)
        dGdomega_star            = dG_dω_fn(zomega_star, sigma_omega_star)
        dGammadomega_star        = dΓ_dω_fn(zomega_star)
        dGdsigma_star            = dG_dσ_fn(zomega_star, sigma_omega_star)
        d2Gdomegadsigma_star     = d2G_dωdσ_fn(zomega_star, sigma_omega_star)
        dGammadsigma_star        = dΓ_dσ_fn(zomega_star, sigma_omega_star)
        d2Gammadomegadsigma_star = d2Γ_dωdσ_fn(zomega_star, sigma_omega_star)

        # evaluate mu, nk, and Rhostar
        mu_estar = μ_fn(zomega_star, sigma_omega_star, spr)
        nkstar   = nk_fn(zomega_star, sigma_omega_star, spr)
        Rhostar  = 1/nkstar - 1

        # evaluate wekstar and vkstar
        wekstar = (1-m["gamma_star"]/m["bet"])*nkstar - m["gamma_star"]/m["bet"]*(spr*(1-mu_estar*Gstar) - 1)
        vkstar  = (nkstar-wekstar)/m["gamma_star"]

        # evaluate nstar and vstar
        ss["nstar"] = nkstar*ss["kstar"]
        ss["vstar"] = vkstar*ss["kstar"]
        ss.update(mu_estar=mu_estar, nkstar=nkstar, Rhostar=Rhostar, wekstar=wekstar, vkstar=vkstar)

        # a couple of combinations
        GammamuG      = Gammastar - mu_estar*Gstar
        GammamuGprime = dGammadomega_star - mu_estar*dGdomega_star

        # elasticities wrt omega_bar
        zeta_bw    = ζ_bω_fn(zomega_star, sigma_omega_star, spr)
        zeta_zw    = ζ_zω_fn(zomega_star, sigma_omega_star, spr)
        zeta_bw_zw = zeta_bw/zeta_zw

        # elasticities wrt sigma_omega
        term1 = (1 - mu_estar*dGdsigma_star/dGammadsigma_star) / (1 - mu_estar*dGdomega_star/dGammadomega_star) - 1
        term2 = term1*dGammadsigma_star*spr
        term3 = mu_estar*nkstar*(dGdomega_star*d2Gammadomegadsigma_star - dGammadomega_star*d2Gdomegadsigma_star)/GammamuGprime**2
        zeta_b_sigma_omega = sigma_omega_star * (term2 + term3) / ((1 - Gammastar)*spr + dGammadomega_star/GammamuGprime*(1-nkstar))
        zeta_z_sigma_omega = sigma_omega_star * (dGammadsigma_star - mu_estar*dGdsigma_star) / GammamuG
        ss["zeta_sp_sigma_omega"] = (zeta_bw_zw*zeta_z_sigma_omega - zeta_b_sigma_omega) / (1-zeta_bw_zw)

        # elasticities wrt mu_e
        zeta_b_mu_e = mu_estar * (nkstar*dGammadomega_star*dGdomega_star/GammamuGprime + dGammadomega_star*Gstar*spr) / \
                      ((1-Gammastar)*GammamuGprime*spr + dGammadomega_star*(1-nkstar))
        zeta_z_mu_e = -mu_estar*Gstar/GammamuG
        ss["zeta_sp_mu_e"] = (zeta_bw_zw*zeta_z_mu_e - zeta_b_mu_e) / (1-zeta_bw_zw)

        # some ratios/elasticities
        Rkstar             = spr*m["pi_star"]*ss["rstar"]  # (rkstar+1-delta)/Upsilon*pi_star
        zeta_gw            = dGdomega_star/Gstar*omega_bar_star
        zeta_G_sigma_omega = dGdsigma_star/Gstar*sigma_omega_star

        # elasticities for the net worth evolution
        nw = m["gamma_star"]*Rkstar/m["pi_star"]/np.exp(ss["zstar"])*(1+Rhostar)
        ss["zeta_nRk"]          = nw*(1 - mu_estar*Gstar*(1 - zeta_gw/zeta_zw))
        ss["zeta_nR"]           = m["gamma_star"]/m["bet"]*(1+Rhostar)*(1 - nkstar + mu_estar*Gstar*spr*zeta_gw/zeta_zw)
        ss["zeta_nqk"]          = nw*(1 - mu_estar*Gstar*(1+zeta_gw/zeta_zw/Rhostar)) - m["gamma_star"]/m["bet"]*(1+Rhostar)
        ss["zeta_nn"]           = m["gamma_star"]/m["bet"] + nw*mu_estar*Gstar*zeta_gw/zeta_zw/Rhostar
        ss["zeta_nmu_e"]        = nw*mu_estar*Gstar*(1 - zeta_gw*zeta_z_mu_e/zeta_zw)
        ss["zeta_nsigma_omega"] = nw*mu_estar*Gstar*(zeta_G_sigma_omega-zeta_gw/zeta_zw*zeta_z_sigma_omega)

        _check_finite(ss, *self.steady_state)
        for name, param in self.steady_state.items():
            param.value = float(ss[name])
        return self.steady_state
