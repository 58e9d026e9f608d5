FIELD_MODULUS = 4002409555221667393417789825735904156556882819939007885332058136124031650490837864442687629129015664037894272559787  # BLS12-381 base field q
CURVE_ORDER = 52435875175126190479447740508185965837690552500527637822603658699938581184513  # prime subgroup order r

FQ_BYTES, FR_BYTES = 48, 32  # canonical big-endian widths
SECRET_KEY_SIZE, PUBLIC_KEY_SIZE, SIGNATURE_SIZE = 32, 48, 96  # wire sizes

POW_2_381, POW_2_382, POW_2_383 = 1 << 381, 1 << 382, 1 << 383  # sign / infinity / compression flag bits

G1_B = 4  # E1: y^2 = x^3 + 4
G2_B = (4, 4)  # E2: y^2 = x^3 + 4(1 + u)
G1_GENERATOR = (
    3685416753713387016781088315183077757961620795782546409894578378688607592378376318836054947676345821548104185464507,
    1339506544944476473020471379941921221584933875938349620426543736416511423956333506472724655353366534992391756441569,
)
G2_GENERATOR = (
    (
        352701069587466618187139116011060144890029952792775240219908644239793785735715026873347600343865175952761926303160,
        3059144344244213709971259814753781636986470325476647558659373206291635324768958432433509563104347017837885763365758,
    ),
    (
        1985150602287291935568054521177171638300868978215655730859378665066344726373823718423869104263333984641494340347905,
        927553665492332455747201965776037880757740193453592970025027978793976877002675564980949289727957565575433344219582,
    ),
)

# Optimal-ate loop count |x| = 0xd201000000010000, LSB first.
PSEUDO_BINARY_ENCODING = tuple(int(c) for c in "0000000000000000100000000000000000000000000000001000000001001011")
ATE_LOOP_BITS = 63  # bits consumed after the implicit leading one

FQ12_MODULUS_COEFFS = (2, 0, 0, 0, 0, 0, -2, 0, 0, 0, 0, 0)  # x^12 - 2x^6 + 2

# (p^4 - p^2 + 1) / r
FINAL_EXP_HARD_PART = 0xF686B3D807D01C0BD38C3195C899ED3CDE88EEB996CA394506632528D6A9A2F230063CF081517F68F7764C28B6F8AE5A72BCE8D63CB9F827ECA0BA621315B2076995003FC77A17988F8761BDC51DC2378B9039096D1B767F17FCBDE783765915C97F36C6F18212ED0B283ED237DB421D160AEB6A1E79983774940996754C8C71A2629B0DEA236905CE937335D5B68FA9912AAE208CCF1E516C3F438E3BA79

_F1 = 3699099184852670630486504326366823957760732022002356992020042909103225195948437585701677765097109891745284740289733
_F2 = 151655185184498381465642749684540099398075398968325446656007613510403227271200139370504932015952886146304766135027
_F3 = 793479390729215512621379701633421447060886740281060493010456487427281649075476305620758731620351
_F4 = 4002409555221667392624310435006688643935503118305586438271171395842971157480381377015405980053539358417135540939436
_F5 = 1028732146235106349975324479215795277384839936929757896155643118032610843298655225875571310552543014690878354869257
_F6 = 4002409555221667392624310435006688643935503118305586438271171395842971157480381377015405980053539358417135540939437
_F7 = 1754153922101215937019363459062510355973529075922864898999271009044415232054910173010132757073180257089147177468460
_F8 = 3125332594171059424908108096204648978570118281977575435832422631601824034463382777937621250592425535493320683825557
_F9 = 4002409555221667393417789825735904156556882819939007885332058136124031650490837864442687629129015664037894272559786
_F10 = 303310370368996762931285499369080198796150797936650893312015227020806454542400278741009864031905772292609532270054
_F11 = 2057464292470212699950648958431590554769679873859515792311286236065221686597310451751142621105086029381756709738514
_F12 = 4002409555221667391830831044277473131314123416672164991210284655561910664469924889588124330978063052796376809319087
_F13 = 793479390729215512621379701633421447060886740281060493010456487427281649075476305620758731620350
_F14 = 2248255633120451456398426366673393800583353744016142986332787127079616418435927691432554872055835406948747095091327

# Row i holds x^(i*p) in the basis 1, x, ..., x^11 as {position: coefficient}.
FROBENIUS_TABLE = (
    {0: 1},
    {1: _F1, 7: _F2},
    {2: _F3, 8: _F4},
    {9: _F5},
    {4: _F6},
    {5: _F7, 11: _F8},
    {0: 2, 6: _F9},
    {1: _F1, 7: _F10},
    {8: _F4},
    {3: _F11},
    {4: _F12, 10: _F13},
    {5: _F7, 11: _F14},
)

# Fq2 square roots.
FQ2_ORDER = FIELD_MODULUS ** 2 - 1  # order of Fq2*
P_MINUS_9_DIV_16 = (FIELD_MODULUS ** 2 - 9) // 16  # sqrt_division exponent
_RV1 = 1028732146235106349975324479215795277384839936929757896155643118032610843298655225875571310552543014690878354869257
_RV2 = 2973677408986561043442465346520108879172042883009249989176415018091420807192182638567116318576472649347015917690530
EVEN_EIGHTH_ROOTS = ((1, 0), (0, 1), (-1, 0), (0, -1))  # zeta^0, zeta^2, zeta^4, zeta^6
SQRT_DIVISORS = ((1, 0), (_RV1, _RV2), (0, 1), (_RV1, _RV1))  # zeta^0..zeta^3
POSITIVE_EIGHTH_ROOTS = ((1, 0), (0, 1), (_RV1, _RV1), (_RV1, -_RV1))  # sqrt_division candidates

# 3-isogenous curve E2': y^2 = x^3 + A'x + B' used by SSWU.
ISO_3_A = (0, 240)
ISO_3_B = (1012, 1012)
ISO_3_Z = (-2, -1)

_ETA_A = 1015919005498129635886032702454337503112659152043614931979881174103627376789972962005013361970813319613593700736144
_ETA_B = 1244231661155348484223428017511856347821538750986231559855759541903146219579071812422210818684355842447591283616181
_ETA_C = 1646015993121829755895883253076789309308090876275172350194834453434199515639474951814226234213676147507404483718679
_ETA_D = 1637752706019426886789797193293828301565549384974986623510918743054325021588194075665960171838131772227885159387073
SSWU_ETAS = ((_ETA_A, _ETA_B), (-_ETA_B, _ETA_A), (_ETA_C, _ETA_D), (-_ETA_D, _ETA_C))

# Isogeny coefficients k0..k3 (ascending degree) for x_num, x_den, y_num, y_den.
_K1 = 889424345604814976315064405719089812568196182208668418962679585805340366775741747653930584250892369786198727235542
_K3 = 3261222600550988246488569487636662646083386001431784202863158481286248011511053074731078808919938689216061999863558
_K4 = 4002409555221667393417789825735904156556882819939007885332058136124031650490837864442687629129015664037894272559355
ISO_3_MAP_COEFFS = (
    (
        (_K1, _K1),
        (0, 2668273036814444928945193217157269437704588546626005256888038757416021100327225242961791752752677109358596181706522),
        (
            2668273036814444928945193217157269437704588546626005256888038757416021100327225242961791752752677109358596181706526,
            1334136518407222464472596608578634718852294273313002628444019378708010550163612621480895876376338554679298090853261,
        ),
        (3557697382419259905260257622876359250272784728834673675850718343221361467102966990615722337003569479144794908942033, 0),
    ),
    (
        (0, 4002409555221667393417789825735904156556882819939007885332058136124031650490837864442687629129015664037894272559715),
        (12, 4002409555221667393417789825735904156556882819939007885332058136124031650490837864442687629129015664037894272559775),
        (1, 0),
        (0, 0),
    ),
    (
        (_K3, _K3),
        (0, 889424345604814976315064405719089812568196182208668418962679585805340366775741747653930584250892369786198727235518),
        (
            2668273036814444928945193217157269437704588546626005256888038757416021100327225242961791752752677109358596181706524,
            1334136518407222464472596608578634718852294273313002628444019378708010550163612621480895876376338554679298090853263,
        ),
        (2816510427748580758331037284777117739799287910327449993381818688383577828123182200904113516794492504322962636245776, 0),
    ),
    (
        (_K4, _K4),
        (0, 4002409555221667393417789825735904156556882819939007885332058136124031650490837864442687629129015664037894272559571),
        (18, 4002409555221667393417789825735904156556882819939007885332058136124031650490837864442687629129015664037894272559769),
        (1, 0),
    ),
)

H_EFF_G2 = 209869847837335686905080341498658477663839067235703451875306851526599783796572738804459333109033834234622528588876978987822447936461846631641690358257586228683615991308971558879306463436166481  # G2 effective cofactor

# expand_message_xmd over SHA-256.
XMD_B_IN_BYTES, XMD_R_IN_BYTES = 32, 64
HASH_TO_FIELD_L = 64  # bytes per field element, ceil((381 + 128) / 8)

DST_NUL = b"BLS_SIG_BLS12381G2_XMD:SHA-256_SSWU_RO_NUL_"
DST_AUG = b"BLS_SIG_BLS12381G2_XMD:SHA-256_SSWU_RO_AUG_"
DST_POP = b"BLS_SIG_BLS12381G2_XMD:SHA-256_SSWU_RO_POP_"
POP_TAG = b"BLS_POP_BLS12381G2_XMD:SHA-256_SSWU_RO_POP_"
KEYGEN_SALT = b"BLS-SIG-KEYGEN-SALT-"
KEYGEN_L = 48  # ceil(3 * ceil(log2(r)) / 16)
KEYGEN_MAX_ATTEMPTS = 256
