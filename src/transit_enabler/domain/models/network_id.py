"""Network identifier domain model."""

from enum import Enum


class NetworkId(Enum):
    """Known transport networks, grouped by region."""

    # Europe
    RT = "rt"

    # Germany
    DB = "db"
    BVG = "bvg"
    VBB = "vbb"
    NVV = "nvv"
    BAYERN = "bayern"
    MVV = "mvv"
    INVG = "invg"
    AVV = "avv"
    VGN = "vgn"
    VVM = "vvm"
    VMV = "vmv"
    HVV = "hvv"
    SH = "sh"
    GVH = "gvh"
    BSVAG = "bsvag"
    VBN = "vbn"
    NASA = "nasa"
    VVO = "vvo"
    VMS = "vms"
    VGS = "vgs"
    VRR = "vrr"
    VRS = "vrs"
    MVG = "mvg"
    NPH = "nph"
    VRN = "vrn"
    VVS = "vvs"
    DING = "ding"
    KVV = "kvv"
    VAGFR = "vagfr"
    NVBW = "nvbw"
    VVV = "vvv"

    # Austria
    OEBB = "oebb"
    VAO = "vao"
    VOR = "vor"
    WIEN = "wien"
    LINZ = "linz"
    VVT = "vvt"
    IVB = "ivb"
    STV = "stv"

    # Switzerland
    SBB = "sbb"
    BVB = "bvb"
    VBL = "vbl"
    ZVV = "zvv"

    # France
    PACA = "paca"
    PARIS = "paris"
    FRENCHSOUTHWEST = "frenchsouthwest"
    FRANCESOUTHEAST = "francesoutheast"
    FRANCENORTHEAST = "francenortheast"
    FRANCENORTHWEST = "francenorthwest"

    # Benelux and Scandinavia
    SNCB = "sncb"
    NS = "ns"
    LU = "lu"
    DSB = "dsb"
    SE = "se"
    NRI = "nri"
    HSL = "hsl"

    # British Isles
    TLEM = "tlem"
    MERSEY = "mersey"
    TFI = "tfi"
    EIREANN = "eireann"

    # Rest of Europe
    PL = "pl"
    ATC = "atc"
    IT = "it"

    # Middle East
    DUB = "dub"
    JET = "jet"

    # North America
    SF = "sf"
    SEPTA = "septa"
    RTACHICAGO = "rtachicago"
    ONTARIO = "ontario"
    QUEBEC = "quebec"

    # Australia
    SYDNEY = "sydney"
    MET = "met"
