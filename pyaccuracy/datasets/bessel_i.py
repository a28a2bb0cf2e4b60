"""
Spot values of the modified Bessel function of the first kind, I_v(x).

Values were computed with the special function calculator at
functions.wolfram.com and are given to 60 significant digits. Inputs
that were written as fractions with power-of-two denominators are spelled
out as their exact decimal expansions, so they are representable in every
numeric type under test.

Columns: (v, x, expected) with expected = I_v(x).
"""

from pyaccuracy.datasets._dataset import TestDataset

_SOURCE = "functions.wolfram.com, 60 significant digits"

I0_DATA = TestDataset.from_rows(
    "Bessel I0: Mathworld Data",
    [
        ("0", "0", "1"),
        ("0", "1", "1.26606587775200833559824462521471753760767031135496220680814"),
        ("0", "-2", "2.27958530233606726743720444081153335328584110278545905407084"),
        ("0", "4", "11.3019219521363304963562701832171024974126165944353377060065"),
        ("0", "-7", "168.593908510289698857326627187500840376522679234531714193194"),
        ("0", "0.0009765625", "1.00000023841859331241759166109699567801556273303717896447683"),
        ("0", "9.5367431640625e-7", "1.00000000000022737367544324498417583090700894607432256476338"),
        ("0", "-1", "1.26606587775200833559824462521471753760767031135496220680814"),
        ("0", "100", "1.07375170713107382351972085760349466128840319332527279540154e42"),
        ("0", "200", "2.03968717340972461954167312677945962233267573614834337894328e85"),
    ],
    description=_SOURCE,
)

I1_DATA = TestDataset.from_rows(
    "Bessel I1: Mathworld Data",
    [
        ("1", "0", "0"),
        ("1", "1", "0.565159103992485027207696027609863307328899621621092009480294"),
        ("1", "-2", "-1.59063685463732906338225442499966624795447815949553664713229"),
        ("1", "4", "9.75946515370444990947519256731268090005597033325296730692753"),
        ("1", "-8", "-399.873136782560098219083086145822754889628443904067647306574"),
        ("1", "0.0009765625", "0.000488281308207663226432087816784315537514225208473395063575150"),
        ("1", "9.5367431640625e-7", "4.76837158203179210108624277276025646653133998635956784292029e-7"),
        ("1", "-10", "-2670.98830370125465434103196677215254914574515378753771310849"),
        ("1", "100", "1.06836939033816248120614576322429526544612284405623226965918e42"),
        ("1", "200", "2.03458154933206270342742797713906950389661161681122964159220e85"),
    ],
    description=_SOURCE,
)

IN_DATA = TestDataset.from_rows(
    "Bessel In: Mathworld Data",
    [
        ("-2", "0", "0"),
        ("2", "9.5367431640625e-7", "1.13686837721624646204093977095674566928522671779753217215467e-13"),
        ("5", "10", "777.188286403259959907293484802339632852674154572666041953297"),
        ("-5", "100", "9.47009387303558124618275555002161742321578485033007130107740e41"),
        ("-5", "-1", "-0.000271463155956971875181073905153777342383564426758143634974124"),
        ("10", "20", "3.54020020901952109905289138244985607057267103782948493874391e6"),
        ("10", "-5", "0.00458004441917605126118647027872016953192323139337073320016447"),
        ("100", "9", "2.74306601746058997093587654668959071522869282506446891736820e-93"),
        ("100", "80", "4.65194832850610205318128191404145885093970505338730540776711e8"),
        ("-100", "-200", "4.35275044972702191438729017441198257508190719030765213981307e74"),
    ],
    description=_SOURCE,
)

IV_DATA = TestDataset.from_rows(
    "Bessel Iv: Mathworld Data",
    [
        ("2.25", "9.5367431640625e-7", "2.34379212133481347189068464680335815256364262507955635911656e-15"),
        ("5.5", "3.125", "0.0583514045989371500460946536220735787163510569634133670181210"),
        ("-4.9990234375", "2.125", "0.0267920938009571023702933210070984416052633027166975342895062"),
        ("-5.5", "10", "597.577606961369169607937419869926705730305175364662688426534"),
        ("-5.5", "100", "9.22362906144706871737354069133813819358704200689067071415379e41"),
        ("-10.0002994537353515625", "0.0009765625", "1.41474005665181350367684623930576333542989766867888186478185e35"),
        ("-10.0002994537353515625", "50", "1.07153277202900671531087024688681954238311679648319534644743e20"),
        ("141.400390625", "100", "2066.27694757392660413922181531984160871678224178890247540320"),
        ("141.400390625", "200", "2.23699739472246928794922868978337381373643889659337595319774e64"),
        ("-141.400390625", "100", "2066.27694672763190927440969155740243346136463461655104698748"),
    ],
    description=_SOURCE,
)

# Tables whose orders are integers, usable with the integer-order wrapper.
INTEGER_ORDER_DATA = (I0_DATA, I1_DATA, IN_DATA)

ALL_SPOT_DATA = (I0_DATA, I1_DATA, IN_DATA, IV_DATA)
