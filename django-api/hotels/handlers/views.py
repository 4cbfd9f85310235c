"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from hotels.domain.errors import DomainError, ErrorCode
from hotels.handlers.serializers import (
    ErrorSerializer,
    HotelSerializer,
    HotelWithRoomsSerializer,
)
from hotels.services import HotelService
from hotels.stores import DjangoHotelStore, DjangoTicketStore

ERROR_STATUS = {
    ErrorCode.TICKET_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.HOTEL_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PAYMENT_REQUIRED: status.HTTP_402_PAYMENT_REQUIRED,
    ErrorCode.STORE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def get_hotel_service() -> HotelService:
    return HotelService(tickets=DjangoTicketStore(), hotels=DjangoHotelStore())


def error_response(error: DomainError) -> Response:
    return Response(ErrorSerializer(error).data, status=ERROR_STATUS[error.code])


class HotelListView(APIView):
    """Handler for GET /hotels"""

    def get(self, request: Request) -> Response:
        try:
            hotels = get_hotel_service().list_hotels(request.user.id)
        except DomainError as error:
            return error_response(error)
        return Response(HotelSerializer(hotels, many=True).data)


class HotelDetailView(APIView):
    """Handler for GET /hotels/{hotel_id}"""

    def get(self, request: Request, hotel_id: str) -> Response:
        try:
            hotel = get_hotel_service().get_hotel_with_rooms(request.user.id, hotel_id)
        except DomainError as error:
            return error_response(error)
        return Response(HotelWithRoomsSerializer(hotel).data)
