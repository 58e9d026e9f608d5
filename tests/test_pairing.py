import pathlib
import sys
import unittest

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))
from oracle import require_slow
from tz4bls.constants import CURVE_ORDER
from tz4bls.curve import G1, G2, Z1, Z2, b, b2, b12, double, is_on_curve, mul, neg
from tz4bls.field import Fq
from tz4bls.fq2 import Fq2
from tz4bls.pairing import (
    GT,
    cast_g1_to_fq12,
    final_exponentiation,
    gt_eq,
    gt_identity,
    gt_inv,
    gt_mul,
    is_identity,
    linefunc,
    miller_loop,
    pairing,
    pairing_check,
    twist,
)

PK = (
    Fq(142036200970556624605073339739716744617077682387984972381936269453125935753630950483159198151608064417555529710056),
    Fq(2483494160399800422427930336203951581951052469458383510716081548592681084410931468919725454864933967710957791304295),
    Fq(1),
)
SIG = (
    Fq2.from_ints(
        557719713869100899792735884412423612752925881945432348574028740116863323339684350929614457611309439314165214724886,
        1668791965312059807836457317548672608113440586303859886296761628901343970400435590790624209989472464715037160193920,
    ),
    Fq2.from_ints(
        3073558251484980343618784409303188474526020343185103665020440010927948686879511955294538475807051866826701497014912,
        778661423249852692826483507760768582493998384356189540302297378665649876608360426793842453334594919142738701066797,
    ),
    Fq2.one(),
)
MSG = (
    Fq2.from_ints(
        609541815135480221679491242259596245016291916671741893976316083730115841428606231710189903049358019248894441560542,
        186747868399426064906369644332149454294179749493253257167219271286836336506747557358696764962145021492044539904337,
    ),
    Fq2.from_ints(
        2944887354525313774795512408027209769132902684354376758581454117346493697901743995034341243540233875062030159838087,
        1196298788400668221187358257261487369865394703637276346955320329475990617992721247881887960289674012968460753206253,
    ),
    Fq2.from_ints(
        1254755152323327664477040668423524855088184820139927603845787718063604803235971326362296876378755690202205033458489,
        3124154259619641509686987122807511096998334884882650306578241574630753320394444748947866047601657825697043248941337,
    ),
)


class LineFunctionTests(unittest.TestCase):
    def test_line_vanishes_on_its_points(self):
        one, two, three = G1, double(G1), mul(G1, 3)
        negone, negtwo = neg(one), neg(two)
        for P1, P2 in ((one, two), (one, one), (one, negone)):
            for T in (P1, P2):
                num, den = linefunc(P1, P2, T)
                self.assertTrue(num.is_zero())
                self.assertFalse(den.is_zero())
        self.assertFalse(linefunc(one, two, three)[0].is_zero())
        self.assertTrue(linefunc(one, two, neg(three))[0].is_zero())
        self.assertFalse(linefunc(one, one, two)[0].is_zero())
        self.assertTrue(linefunc(one, one, negtwo)[0].is_zero())
        self.assertFalse(linefunc(one, negone, two)[0].is_zero())

    def test_twist_and_cast(self):
        self.assertTrue(is_on_curve(twist(G2), b12))
        self.assertTrue(is_on_curve(twist(mul(G2, 5)), b12))
        x, y, z = cast_g1_to_fq12(G1)
        self.assertEqual(x.to_ints(), [int(G1[0])] + [0] * 11)
        self.assertTrue(z.is_one())


class PairingTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        require_slow()
        cls.p1 = pairing(G1, G2)

    def test_negation(self):
        self.assertTrue((self.p1 * pairing(neg(G1), G2)).is_one())
        self.assertTrue(gt_eq(pairing(G1, neg(G2)), gt_inv(self.p1)))

    def test_order(self):
        self.assertTrue((self.p1**CURVE_ORDER).is_one())
        self.assertFalse(self.p1.is_one())

    def test_bilinearity(self):
        p2 = pairing(mul(G1, 2), G2)
        po2 = pairing(G1, mul(G2, 2))
        self.assertEqual(self.p1 * self.p1, p2)
        self.assertEqual(gt_mul(self.p1, self.p1), po2)
        np1 = pairing(G1, neg(G2))
        self.assertNotEqual(self.p1, p2)
        self.assertNotEqual(self.p1, np1)
        self.assertNotEqual(p2, np1)

    def test_composite(self):
        self.assertEqual(pairing(mul(G1, 37), mul(G2, 27)), pairing(mul(G1, 999), G2))

    def test_identity_inputs(self):
        self.assertTrue(is_identity(pairing(Z1, G2)))
        self.assertTrue(is_identity(pairing(G1, Z2)))
        self.assertEqual(gt_identity(), GT.one())

    def test_miller_loop_then_final_exponentiation(self):
        f = pairing(G1, G2, final_exponentiate=False)
        self.assertEqual(f, miller_loop(G2, G1))
        self.assertEqual(final_exponentiation(f), self.p1)

    def test_known_signature_points(self):
        self.assertTrue(is_on_curve(PK, b))
        self.assertTrue(is_on_curve(SIG, b2))
        self.assertTrue(is_on_curve(MSG, b2))
        self.assertEqual(pairing(G1, SIG), pairing(PK, MSG))
        self.assertTrue(pairing_check(PK, MSG, G1, SIG))
        self.assertFalse(pairing_check(PK, MSG, G1, neg(SIG)))
        self.assertFalse(pairing_check(PK, G2, G1, SIG))


class PairingInputTests(unittest.TestCase):
    def test_rejects_off_curve(self):
        bad1 = (Fq(1), Fq(1), Fq(1))
        bad2 = (Fq2.one(), Fq2.one(), Fq2.one())
        with self.assertRaisesRegex(ValueError, "P not on G1"):
            pairing(bad1, G2)
        with self.assertRaisesRegex(ValueError, "Q not on G2"):
            pairing(G1, bad2)

    def test_pairing_check_rejects_bad_inputs(self):
        bad1 = (Fq(1), Fq(1), Fq(1))
        bad2 = (Fq2.one(), Fq2.one(), Fq2.one())
        self.assertFalse(pairing_check(Z1, G2, G1, G2))
        self.assertFalse(pairing_check(G1, Z2, G1, G2))
        self.assertFalse(pairing_check(G1, G2, G1, Z2))
        self.assertFalse(pairing_check(bad1, G2, G1, G2))
        self.assertFalse(pairing_check(G1, bad2, G1, G2))
        self.assertFalse(pairing_check(G1, G2, G1, bad2))

    def test_pairing_check_trivial_relation(self):
        require_slow()
        self.assertTrue(pairing_check(G1, G2, G1, G2))
        self.assertTrue(pairing_check(mul(G1, 3), G2, G1, mul(G2, 3)))
        self.assertFalse(pairing_check(mul(G1, 3), G2, G1, mul(G2, 4)))


if __name__ == "__main__":
    unittest.main()
