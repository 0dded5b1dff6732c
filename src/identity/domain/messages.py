"""
Client-facing identity messages.

Storefront clients match on these strings, spelling included, so they are
kept byte-for-byte stable.
"""

# Registration
NAME_REQUIRED = "Name is Required"
EMAIL_REQUIRED = "Email is Required"
PASSWORD_REQUIRED = "Password is Required"
PHONE_REQUIRED = "Phone no is Required"
ADDRESS_REQUIRED = "Address is Required"
ANSWER_REQUIRED = "Answer is Required"
ALREADY_REGISTERED = "Already Register please login"
REGISTERED = "User Register Successfully"
REGISTER_FAILED = "Errro in Registeration"

# Login
INVALID_EMAIL_OR_PASSWORD = "Invalid email or password"
EMAIL_NOT_REGISTERED = "Email is not registerd"
INVALID_PASSWORD = "Invalid Password"
LOGGED_IN = "login successfully"
LOGIN_FAILED = "Error in login"

# Password recovery
RECOVERY_EMAIL_REQUIRED = "Email is required"
RECOVERY_ANSWER_REQUIRED = "Answer is required"
RECOVERY_NEW_PASSWORD_REQUIRED = "New Password is required"
WRONG_EMAIL_OR_ANSWER = "Wrong Email Or Answer"
PASSWORD_RESET = "Password Reset Successfully"
RECOVERY_FAILED = "Something went wrong"

# Profile
PROFILE_PASSWORD_TOO_SHORT = "Passsword is required and 6 character long"
PROFILE_UPDATED = "Profile Updated SUccessfully"
PROFILE_UPDATE_FAILED = "Error WHile Update profile"

# Guards
UNAUTHORIZED_ACCESS = "UnAuthorized Access"
PROTECTED_ROUTES = "Protected Routes"
