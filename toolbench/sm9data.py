"""Standard SM9 test vectors, with a command that prints them as hex."""

from __future__ import annotations

from toolbench.hexutil import bytes_to_hex


def _hex(*rows: str) -> bytes:
    return bytes.fromhex("".join(rows))


def _padded(data: bytes, size: int) -> bytes:
    return data + bytes(size - len(data))


def standard_vectors() -> dict[str, bytes]:
    """Return the vectors by label, in the order the command prints them."""
    return {
        "Ks": _hex(
            "000130E78459D78545CB54C587E02CF4",
            "80CE0B66340F319F348A1D5B1F2DC5F4",
        ),
        "ppubs": _hex(
            "9F64080B3084F733E48AFF4B41B56501",
            "1CE0711C5E392CFB0AB1B6791B94C408",
            "29DBA116152D1F786CE843ED24A3B573",
            "414D2177386A92DD8F14D65696EA5E32",
            "69850938ABEA0112B57329F447E3A0CB",
            "AD3E2FDB1A77F335E89E1408D0EF1C25",
            "41E00A53DDA532DA1A7CE027B7A46F74",
            "1006E85F5CDFF0730E75C05FB4E3216D",
        ),
        "ke": _hex(
            "0001EDEE3778F441F8DEA3D9FA0ACC4E",
            "07EE36C93F9A08618AF4AD85CEDE1C22",
        ),
        "enc ppub": _hex(
            "787ED7B8A51F3AB84E0A66003F32DA5C",
            "720B17ECA7137D39ABC66E3C80A892FF",
            "769DE61791E5ADC4B9FF85A31354900B",
            "202871279A8C49DC3F220F644C57A7B1",
        ),
        "sig ndsA": _hex(
            "A5702F05CF1315305E2D6EB64B0DEB92",
            "3DB1A0BCF0CAFF90523AC8754AA69820",
            "78559A844411F9825C109F5EE3F52D72",
            "0DD01785392A727BB1556952B2B013D3",
        ),
        "enc dsB": _hex(
            "94736ACD2C8C8796CC4785E938301A13",
            "9A059D3537B6414140B2D31EECF41683",
            "115BAE85F5D8BC6C3DBD9E5342979ACC",
            "CF3C2F4F28420B1CB4F8C0B59A19B158",
            "7AA5E47570DA7600CD760A0CF7BEAF71",
            "C447F3844753FE74FA7BA92CA7D3B55F",
            "27538A62E7F7BFB51DCE08704796D94C",
            "9D56734F119EA44732B50E31CDEB75C1",
        ),
        "H": _hex(
            "823C4B21E4BD2DFE1ED92C606653E996",
            "668563152FC33F55D7BFBB9BD9705ADB",
        ),
        "S": _hex(
            "73BF96923CE58B6AD0E13E9643A406D8",
            "EB98417C50EF1B29CEF9ADB48B6D598C",
            "856712F1C2E0968AB7769F42A99586AE",
            "D139D5B8B3E15891827CC2ACED9BAA05",
        ),
        "C stream": _hex(
            "2445471164490618E1EE20528FF1D545",
            "B0F14C8BCAA44544F03DAB5DAC07D8FF",
            "42FFCA97D57CDDC05EA405F2E586FEB3",
            "A6930715532B8000759F13059ED59AC0",
            "BA672387BCD6DE5016A158A52BB2E7FC",
            "429197BCAB70B25AFEE37A2B9DB9F367",
            "1B5F5B0E951489682F3E64E1378CDD5D",
            "A9513B1C",
        ),
        # The key buffer is 64 bytes wide but only its first half is filled.
        "key": _padded(
            _hex(
                "4FF5CF86D2AD40C8F4BAC98D76ABDBDE",
                "0C0E2F0A829D3F911EF5B2BCE0695480",
            ),
            64,
        ),
        "cipher": _hex(
            "1EDEE2C3F465914491DE44CEFB2CB434",
            "AB02C308D9DC5E2067B4FED5AAAC8A0F",
            "1C9B4C435ECA35AB83BB734174C0F78F",
            "DE81A53374AFF3B3602BBC5E37BE9A4C",
        ),
    }


def main(argv: list[str] | None = None) -> int:
    """Print every standard vector as upper-case hex."""
    for label, data in standard_vectors().items():
        print(f"std {label} hex is {bytes_to_hex(data)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())