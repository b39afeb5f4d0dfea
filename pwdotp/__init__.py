from pwdotp.base32 import encode, decode
from pwdotp.passcode import PasscodeGenerator, hmac_signer
from pwdotp.errors import OTPError, InvalidConfiguration, InvalidCharacter, InputTooLarge, SigningFailure
