"""Sample card values shared by the test suite."""

CARD_ID = "942844931049980509"
CARD_NUMBER = "5541710500064352"
CVV = "999"
EXP_MONTH = "12"
EXP_YEAR = "2020"
CUSTOMER_ID = "123456789"
CARD_NAME = "SIRIMONGKOL PANWA"
CARD_COMPANY = "SCB"
