import logging

from suite_money.domain.monetary.currency import Currency, CurrencyType

logger = logging.getLogger(__name__)

F = CurrencyType.FIAT
N = CurrencyType.FUND
C = CurrencyType.COMMODITY
X = CurrencyType.OTHER

# Active ISO 4217 codes: (alphabetic code, numeric code, name, type)
ISO_4217_CURRENCIES = [
    ("AED", 784, "UAE Dirham", F),
    ("AFN", 971, "Afghani", F),
    ("ALL", 8, "Lek", F),
    ("AMD", 51, "Armenian Dram", F),
    ("AOA", 973, "Kwanza", F),
    ("ARS", 32, "Argentine Peso", F),
    ("AUD", 36, "Australian Dollar", F),
    ("AWG", 533, "Aruban Florin", F),
    ("AZN", 944, "Azerbaijan Manat", F),
    ("BAM", 977, "Convertible Mark", F),
    ("BBD", 52, "Barbados Dollar", F),
    ("BDT", 50, "Taka", F),
    ("BGN", 975, "Bulgarian Lev", F),
    ("BHD", 48, "Bahraini Dinar", F),
    ("BIF", 108, "Burundi Franc", F),
    ("BMD", 60, "Bermudian Dollar", F),
    ("BND", 96, "Brunei Dollar", F),
    ("BOB", 68, "Boliviano", F),
    ("BOV", 984, "Mvdol", N),
    ("BRL", 986, "Brazilian Real", F),
    ("BSD", 44, "Bahamian Dollar", F),
    ("BTN", 64, "Ngultrum", F),
    ("BWP", 72, "Pula", F),
    ("BYN", 933, "Belarusian Ruble", F),
    ("BZD", 84, "Belize Dollar", F),
    ("CAD", 124, "Canadian Dollar", F),
    ("CDF", 976, "Congolese Franc", F),
    ("CHE", 947, "WIR Euro", N),
    ("CHF", 756, "Swiss Franc", F),
    ("CHW", 948, "WIR Franc", N),
    ("CLF", 990, "Unidad de Fomento", N),
    ("CLP", 152, "Chilean Peso", F),
    ("CNY", 156, "Yuan Renminbi", F),
    ("COP", 170, "Colombian Peso", F),
    ("COU", 970, "Unidad de Valor Real", N),
    ("CRC", 188, "Costa Rican Colon", F),
    ("CUP", 192, "Cuban Peso", F),
    ("CVE", 132, "Cabo Verde Escudo", F),
    ("CZK", 203, "Czech Koruna", F),
    ("DJF", 262, "Djibouti Franc", F),
    ("DKK", 208, "Danish Krone", F),
    ("DOP", 214, "Dominican Peso", F),
    ("DZD", 12, "Algerian Dinar", F),
    ("EGP", 818, "Egyptian Pound", F),
    ("ERN", 232, "Nakfa", F),
    ("ETB", 230, "Ethiopian Birr", F),
    ("EUR", 978, "Euro", F),
    ("FJD", 242, "Fiji Dollar", F),
    ("FKP", 238, "Falkland Islands Pound", F),
    ("GBP", 826, "Pound Sterling", F),
    ("GEL", 981, "Lari", F),
    ("GHS", 936, "Ghana Cedi", F),
    ("GIP", 292, "Gibraltar Pound", F),
    ("GMD", 270, "Dalasi", F),
    ("GNF", 324, "Guinean Franc", F),
    ("GTQ", 320, "Quetzal", F),
    ("GYD", 328, "Guyana Dollar", F),
    ("HKD", 344, "Hong Kong Dollar", F),
    ("HNL", 340, "Lempira", F),
    ("HTG", 332, "Gourde", F),
    ("HUF", 348, "Forint", F),
    ("IDR", 360, "Rupiah", F),
    ("ILS", 376, "New Israeli Sheqel", F),
    ("INR", 356, "Indian Rupee", F),
    ("IQD", 368, "Iraqi Dinar", F),
    ("IRR", 364, "Iranian Rial", F),
    ("ISK", 352, "Iceland Krona", F),
    ("JMD", 388, "Jamaican Dollar", F),
    ("JOD", 400, "Jordanian Dinar", F),
    ("JPY", 392, "Yen", F),
    ("KES", 404, "Kenyan Shilling", F),
    ("KGS", 417, "Som", F),
    ("KHR", 116, "Riel", F),
    ("KMF", 174, "Comorian Franc", F),
    ("KPW", 408, "North Korean Won", F),
    ("KRW", 410, "Won", F),
    ("KWD", 414, "Kuwaiti Dinar", F),
    ("KYD", 136, "Cayman Islands Dollar", F),
    ("KZT", 398, "Tenge", F),
    ("LAK", 418, "Lao Kip", F),
    ("LBP", 422, "Lebanese Pound", F),
    ("LKR", 144, "Sri Lanka Rupee", F),
    ("LRD", 430, "Liberian Dollar", F),
    ("LSL", 426, "Loti", F),
    ("LYD", 434, "Libyan Dinar", F),
    ("MAD", 504, "Moroccan Dirham", F),
    ("MDL", 498, "Moldovan Leu", F),
    ("MGA", 969, "Malagasy Ariary", F),
    ("MKD", 807, "Denar", F),
    ("MMK", 104, "Kyat", F),
    ("MNT", 496, "Tugrik", F),
    ("MOP", 446, "Pataca", F),
    ("MRU", 929, "Ouguiya", F),
    ("MUR", 480, "Mauritius Rupee", F),
    ("MVR", 462, "Rufiyaa", F),
    ("MWK", 454, "Malawi Kwacha", F),
    ("MXN", 484, "Mexican Peso", F),
    ("MXV", 979, "Mexican Unidad de Inversion (UDI)", N),
    ("MYR", 458, "Malaysian Ringgit", F),
    ("MZN", 943, "Mozambique Metical", F),
    ("NAD", 516, "Namibia Dollar", F),
    ("NGN", 566, "Naira", F),
    ("NIO", 558, "Cordoba Oro", F),
    ("NOK", 578, "Norwegian Krone", F),
    ("NPR", 524, "Nepalese Rupee", F),
    ("NZD", 554, "New Zealand Dollar", F),
    ("OMR", 512, "Rial Omani", F),
    ("PAB", 590, "Balboa", F),
    ("PEN", 604, "Sol", F),
    ("PGK", 598, "Kina", F),
    ("PHP", 608, "Philippine Peso", F),
    ("PKR", 586, "Pakistan Rupee", F),
    ("PLN", 985, "Zloty", F),
    ("PYG", 600, "Guarani", F),
    ("QAR", 634, "Qatari Rial", F),
    ("RON", 946, "Romanian Leu", F),
    ("RSD", 941, "Serbian Dinar", F),
    ("RUB", 643, "Russian Ruble", F),
    ("RWF", 646, "Rwanda Franc", F),
    ("SAR", 682, "Saudi Riyal", F),
    ("SBD", 90, "Solomon Islands Dollar", F),
    ("SCR", 690, "Seychelles Rupee", F),
    ("SDG", 938, "Sudanese Pound", F),
    ("SEK", 752, "Swedish Krona", F),
    ("SGD", 702, "Singapore Dollar", F),
    ("SHP", 654, "Saint Helena Pound", F),
    ("SLE", 925, "Leone", F),
    ("SOS", 706, "Somali Shilling", F),
    ("SRD", 968, "Surinam Dollar", F),
    ("SSP", 728, "South Sudanese Pound", F),
    ("STN", 930, "Dobra", F),
    ("SVC", 222, "El Salvador Colon", F),
    ("SYP", 760, "Syrian Pound", F),
    ("SZL", 748, "Lilangeni", F),
    ("THB", 764, "Baht", F),
    ("TJS", 972, "Somoni", F),
    ("TMT", 934, "Turkmenistan New Manat", F),
    ("TND", 788, "Tunisian Dinar", F),
    ("TOP", 776, "Pa'anga", F),
    ("TRY", 949, "Turkish Lira", F),
    ("TTD", 780, "Trinidad and Tobago Dollar", F),
    ("TWD", 901, "New Taiwan Dollar", F),
    ("TZS", 834, "Tanzanian Shilling", F),
    ("UAH", 980, "Hryvnia", F),
    ("UGX", 800, "Uganda Shilling", F),
    ("USD", 840, "US Dollar", F),
    ("USN", 997, "US Dollar (Next day)", N),
    ("UYI", 940, "Uruguay Peso en Unidades Indexadas (UI)", N),
    ("UYU", 858, "Peso Uruguayo", F),
    ("UYW", 927, "Unidad Previsional", N),
    ("UZS", 860, "Uzbekistan Sum", F),
    ("VED", 926, "Bolivar Soberano", F),
    ("VES", 928, "Bolivar Soberano", F),
    ("VND", 704, "Dong", F),
    ("VUV", 548, "Vatu", F),
    ("WST", 882, "Tala", F),
    ("XAF", 950, "CFA Franc BEAC", F),
    ("XAG", 961, "Silver", C),
    ("XAU", 959, "Gold", C),
    ("XBA", 955, "Bond Markets Unit European Composite Unit (EURCO)", X),
    ("XBB", 956, "Bond Markets Unit European Monetary Unit (E.M.U.-6)", X),
    ("XBC", 957, "Bond Markets Unit European Unit of Account 9 (E.U.A.-9)", X),
    ("XBD", 958, "Bond Markets Unit European Unit of Account 17 (E.U.A.-17)", X),
    ("XCD", 951, "East Caribbean Dollar", F),
    ("XCG", 532, "Caribbean Guilder", F),
    ("XDR", 960, "SDR (Special Drawing Right)", X),
    ("XOF", 952, "CFA Franc BCEAO", F),
    ("XPD", 964, "Palladium", C),
    ("XPF", 953, "CFP Franc", F),
    ("XPT", 962, "Platinum", C),
    ("XSU", 994, "Sucre", X),
    ("XTS", 963, "Codes specifically reserved for testing purposes", X),
    ("XUA", 965, "ADB Unit of Account", X),
    ("XXX", 999, "No currency involved", X),
    ("YER", 886, "Yemeni Rial", F),
    ("ZAR", 710, "Rand", F),
    ("ZMW", 967, "Zambian Kwacha", F),
    ("ZWG", 924, "Zimbabwe Gold", F),
]

# Register all predefined currencies
for _code, _numeric_code, _name, _currency_type in ISO_4217_CURRENCIES:
    Currency.register(Currency(_code, _numeric_code, _name, _currency_type), overwrite=True)

logger.debug(f"Registered {len(ISO_4217_CURRENCIES)} ISO 4217 currencies")

# Frequently used currencies
USD = Currency.from_str("USD")
EUR = Currency.from_str("EUR")
GBP = Currency.from_str("GBP")
AUD = Currency.from_str("AUD")
CAD = Currency.from_str("CAD")
CHF = Currency.from_str("CHF")
JPY = Currency.from_str("JPY")
XAU = Currency.from_str("XAU")
