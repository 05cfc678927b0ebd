# SPDX-FileCopyrightText: 2020-present Dan Pascu <dan@aethereal.link>
#
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Illustrative domain objects and their hand-built type descriptors."""

from dataclasses import dataclass
from functools import cache

from .descriptors import DataField, ElementField, TypeDescriptor

__all__ = (  # noqa: RUF022
    'Address',
    'Country',
    'PhoneNumber',
    'Person',

    'address_descriptor',
    'country_descriptor',
    'phone_number_descriptor',
    'person_descriptor',

    'sample_person',
)


@dataclass
class Address:
    street: str
    city: str


@dataclass
class Country:
    name: str
    area_code: int


@dataclass
class PhoneNumber:
    country: Country
    number: int


@dataclass
class Person:
    first_name: str
    last_name: str
    home_address: Address
    work_address: Address
    citizen_of: Country
    mobile_phone: PhoneNumber


@cache
def address_descriptor() -> TypeDescriptor[Address]:
    descriptor = TypeDescriptor[Address]('Address')
    descriptor.register_field(DataField(str, 'Street', lambda address: address.street))
    descriptor.register_field(DataField(str, 'City', lambda address: address.city))
    return descriptor


@cache
def country_descriptor() -> TypeDescriptor[Country]:
    descriptor = TypeDescriptor[Country]('Country')
    descriptor.register_field(DataField(str, 'Name', lambda country: country.name))
    descriptor.register_field(DataField(int, 'AreaCode', lambda country: country.area_code))
    return descriptor


@cache
def phone_number_descriptor() -> TypeDescriptor[PhoneNumber]:
    descriptor = TypeDescriptor[PhoneNumber]('PhoneNumber')
    descriptor.register_field(ElementField('Country', country_descriptor(), lambda phone_number: phone_number.country))
    descriptor.register_field(DataField(int, 'Number', lambda phone_number: phone_number.number))
    return descriptor


@cache
def person_descriptor() -> TypeDescriptor[Person]:
    descriptor = TypeDescriptor[Person]('Person')
    descriptor.register_field(DataField(str, 'FirstName', lambda person: person.first_name))
    descriptor.register_field(DataField(str, 'LastName', lambda person: person.last_name))
    descriptor.register_field(ElementField('HomeAddress', address_descriptor(), lambda person: person.home_address))
    descriptor.register_field(ElementField('WorkAddress', address_descriptor(), lambda person: person.work_address))
    descriptor.register_field(ElementField('CitizenOf', country_descriptor(), lambda person: person.citizen_of))
    descriptor.register_field(ElementField('MobilePhone', phone_number_descriptor(), lambda person: person.mobile_phone))
    return descriptor


def sample_person() -> Person:
    czech_republic = Country(name='Czech Republic', area_code=420)
    return Person(
        first_name='Pavel',
        last_name='Jezek',
        home_address=Address(street='Patkova', city='Prague'),
        work_address=Address(street='Malostranske namesti', city='Prague'),
        citizen_of=czech_republic,
        mobile_phone=PhoneNumber(country=czech_republic, number=123456789),
    )
